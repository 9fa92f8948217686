"""Data models for description trees, actions and extracted records."""

from .text_nodes import (
    TagType, TextNode, ParameterNode, ConditionalNode, RichText, Node, text,
    PRESENTATION_TAGS, CONDITIONAL_TAGS,
)
from .action_record import ActionRecord
from .action_data import ActionData, ClassJobData

__all__ = [
    "TagType", "TextNode", "ParameterNode", "ConditionalNode", "RichText", "Node", "text",
    "PRESENTATION_TAGS", "CONDITIONAL_TAGS",
    "ActionRecord", "ActionData", "ClassJobData",
]
