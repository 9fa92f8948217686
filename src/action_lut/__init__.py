"""Action potency lookup-table generator."""

__version__ = "0.1.0"

# Set up logging configuration on import
import os
from .utils.logging_config import setup_logging

log_level = os.getenv('ACTION_LUT_LOG_LEVEL', 'INFO')
setup_logging(level=log_level)

from . import models
from . import parsing
from . import loaders
from . import output
from .errors import MalformedTreeError, ActionDataError
from .generator import ActionLutGenerator

__all__ = [
    "models", "parsing", "loaders", "output",
    "MalformedTreeError", "ActionDataError", "ActionLutGenerator",
]
