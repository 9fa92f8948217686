"""Run configuration for the action LUT generator."""

import os
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_OUTPUT_PATH = "ActionLutData.cpp"


def _env_log_level() -> str:
    return os.getenv('ACTION_LUT_LOG_LEVEL', 'INFO')


@dataclass
class GeneratorConfig:
    """Paths and options for one generator run."""
    data_path: Optional[str] = None
    output_path: str = DEFAULT_OUTPUT_PATH
    template_path: Optional[str] = None
    language: str = "en"
    log_level: str = field(default_factory=_env_log_level)
    skip_malformed: bool = False
    
    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a config from ACTION_LUT_* environment variables."""
        return cls(
            data_path=os.getenv('ACTION_LUT_DATA_PATH'),
            output_path=os.getenv('ACTION_LUT_OUTPUT_PATH', DEFAULT_OUTPUT_PATH),
            template_path=os.getenv('ACTION_LUT_TEMPLATE_PATH'),
            language=os.getenv('ACTION_LUT_LANGUAGE', 'en'),
        )
    
    def validate(self) -> None:
        if not self.data_path:
            raise ValueError("No action data path configured")
        if not self.output_path:
            raise ValueError("No output path configured")
