"""Decoding of JSON-exported description trees into text nodes."""

from typing import Any, Dict, List, Union

from ..errors import MalformedTreeError
from ..models.text_nodes import (
    CONDITIONAL_TAGS, ConditionalNode, Node, ParameterNode, RichText, TagType, TextNode,
)

_TAGS_BY_NAME = {tag.value: tag for tag in TagType}


def decode_node(data: Union[Dict[str, Any], List[Any], str]) -> Node:
    """Decode one exported node.
    
    A list decodes to a RichText group and a bare string to a text node.
    Dicts carry a ``tag``; conditionals also carry ``true`` and ``false``.
    """
    if isinstance(data, list):
        return RichText([decode_node(item) for item in data])
    if isinstance(data, str):
        return TextNode(TagType.TEXT, data)
    if not isinstance(data, dict):
        raise MalformedTreeError(f"Unexpected node value: {data!r}")
    
    tag_name = data.get('tag')
    if tag_name is None:
        raise MalformedTreeError(f"Node has no tag: {data!r}")
    tag = _TAGS_BY_NAME.get(str(tag_name).lower(), TagType.UNKNOWN)
    
    if tag in CONDITIONAL_TAGS:
        if 'false' not in data:
            raise MalformedTreeError(f"{tag.value} node has no false branch")
        true_value = data.get('true')
        return ConditionalNode(
            tag=tag,
            condition=data.get('condition'),
            true_value=decode_node(true_value) if true_value is not None else RichText(),
            false_value=decode_node(data['false']),
        )
    
    if tag == TagType.NONE:
        return RichText([decode_node(item) for item in data.get('children', [])])
    
    if tag == TagType.VALUE:
        try:
            return ParameterNode(int(data.get('value', 0)))
        except (TypeError, ValueError) as e:
            raise MalformedTreeError(f"Value node has a non-integer value: {data.get('value')!r}") from e
    
    node_text = data.get('text', '')
    if not isinstance(node_text, str):
        raise MalformedTreeError(f"{tag.value} node has non-string text: {node_text!r}")
    return TextNode(tag, node_text)


def decode_description(data: Any) -> RichText:
    """Decode a whole description; ``None`` yields an empty description."""
    if data is None:
        return RichText()
    node = decode_node(data)
    if isinstance(node, RichText):
        return node
    return RichText([node])
