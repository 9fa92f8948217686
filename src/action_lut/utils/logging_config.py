"""Logging configuration for the action LUT generator."""

import logging
import sys


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Set up logging configuration for the entire application.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    
    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])
    
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # Applies even when logging was configured by an earlier call
    logging.getLogger().setLevel(numeric_level)


def get_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for package modules.
    
    Args:
        module_name: Full module name (e.g., 'action_lut.parsing.text_filter')
        
    Returns:
        Logger with shortened name (e.g., 'parsing.text_filter')
    """
    if module_name.startswith('action_lut.'):
        short_name = module_name[len('action_lut.'):]
    else:
        short_name = module_name
    
    return logging.getLogger(short_name)
