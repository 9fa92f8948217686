"""Writes extracted records into the generated C++ lookup-table source."""

from importlib import resources
from pathlib import Path
from typing import Iterable, Optional

from ..models.action_record import ActionRecord
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

PLACEHOLDER = "%INSERT_GARBAGE%"
DEFAULT_TEMPLATE = "ActionLutData.cpp.tmpl"


def load_default_template() -> str:
    """Read the template bundled with the package."""
    return resources.files(__package__).joinpath("templates").joinpath(DEFAULT_TEMPLATE).read_text(encoding="utf-8")


class CppWriter:
    """Renders ActionRecords into a C++ source file from a template."""
    
    def __init__(self, template_path: Optional[str] = None):
        if template_path is None:
            self.template = load_default_template()
        else:
            self.template = Path(template_path).read_text(encoding="utf-8")
        
        if PLACEHOLDER not in self.template:
            raise ValueError(f"Template has no {PLACEHOLDER} placeholder")
    
    def render(self, records: Iterable[ActionRecord]) -> str:
        body = "\n".join(record.to_initializer() for record in records)
        return self.template.replace(PLACEHOLDER, body)
    
    def write(self, records: Iterable[ActionRecord], output_path: str) -> Path:
        """Render and write the output file, creating parent directories."""
        records = list(records)
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(self.render(records))
        
        logger.info(f"Wrote {len(records)} actions to {output_file}")
        return output_file
