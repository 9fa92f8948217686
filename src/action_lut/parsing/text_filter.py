"""Flattening of description trees into presentation-free node sequences."""

from typing import Iterable, List

from ..errors import MalformedTreeError
from ..models.text_nodes import CONDITIONAL_TAGS, PRESENTATION_TAGS, TagType


def filter_node(node, nodes: List) -> None:
    """Append the filtered content of ``node`` to ``nodes``.
    
    Colour and glow markers are dropped. Conditionals are replaced by the
    filtered content of their false branch, which holds the base state of the
    action; the true branch is never visited. Grouping containers are walked
    child by child. Every other node is appended unchanged.
    """
    tag = getattr(node, 'tag', None)
    if tag is None:
        raise MalformedTreeError(f"Description node has no tag: {node!r}")
    
    if tag in PRESENTATION_TAGS:
        return
    
    if tag in CONDITIONAL_TAGS:
        false_value = getattr(node, 'false_value', None)
        if false_value is None:
            raise MalformedTreeError(f"{tag.value} node has no false branch")
        filter_node(false_value, nodes)
        return
    
    if tag == TagType.NONE:
        for child in node.children:
            filter_node(child, nodes)
        return
    
    nodes.append(node)


def filter_description(children: Iterable) -> List:
    """Filter each top-level child of a description, in order."""
    nodes: List = []
    for child in children:
        filter_node(child, nodes)
    return nodes
