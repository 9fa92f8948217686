"""Test helper utilities for action LUT tests."""

from .description_helpers import (
    create_text,
    create_color,
    create_glow,
    create_if,
    create_description,
    create_action
)

__all__ = [
    'create_text',
    'create_color',
    'create_glow',
    'create_if',
    'create_description',
    'create_action'
]
