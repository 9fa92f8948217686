"""Description filtering and potency extraction."""

from .text_filter import filter_node, filter_description
from .field_extractor import FieldExtractor, FIELD_PATTERNS, parse_uint, flatten

__all__ = [
    "filter_node", "filter_description",
    "FieldExtractor", "FIELD_PATTERNS", "parse_uint", "flatten",
]
