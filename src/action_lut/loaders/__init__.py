"""Loaders for exported game data."""

from .action_sheet import ActionSheet
from .node_decoder import decode_node, decode_description

__all__ = ["ActionSheet", "decode_node", "decode_description"]
