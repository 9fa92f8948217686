"""Rich-text node model for localized action descriptions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from ..errors import MalformedTreeError


class TagType(Enum):
    """Kinds of node found in a description tree."""
    NONE = "none"
    TEXT = "text"
    UI_FOREGROUND = "ui_foreground"
    UI_GLOW = "ui_glow"
    IF = "if"
    IF_EQUALS = "if_equals"
    NEW_LINE = "new_line"
    SOFT_HYPHEN = "soft_hyphen"
    EMPHASIS = "emphasis"
    VALUE = "value"
    UNKNOWN = "unknown"


PRESENTATION_TAGS = frozenset({TagType.UI_FOREGROUND, TagType.UI_GLOW})
CONDITIONAL_TAGS = frozenset({TagType.IF, TagType.IF_EQUALS})

# Inline markers whose plain-text rendering is fixed regardless of payload
_FIXED_RENDERINGS = {
    TagType.NEW_LINE: "\n",
    TagType.SOFT_HYPHEN: "",
    TagType.EMPHASIS: "",
    TagType.UI_FOREGROUND: "",
    TagType.UI_GLOW: "",
}


@dataclass
class TextNode:
    """A leaf fragment of a description: plain text or an inline marker."""
    tag: TagType
    text: str = ""

    def __post_init__(self) -> None:
        if self.tag in CONDITIONAL_TAGS:
            raise ValueError(f"Conditional tag {self.tag.value} requires a ConditionalNode")
        if self.tag == TagType.NONE:
            raise ValueError("Grouped content must be a RichText, not a TextNode")

    def to_text(self) -> str:
        return _FIXED_RENDERINGS.get(self.tag, self.text)

    def __str__(self) -> str:
        return self.to_text()


@dataclass
class ParameterNode:
    """A numeric parameter already resolved by the data source."""
    value: int
    tag: TagType = field(default=TagType.VALUE, init=False)

    def to_text(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.to_text()


@dataclass
class ConditionalNode:
    """An If/IfEquals node carrying a true branch and a false branch."""
    tag: TagType
    true_value: Optional["Node"]
    false_value: Optional["Node"]
    condition: Any = None

    def __post_init__(self) -> None:
        if self.tag not in CONDITIONAL_TAGS:
            raise ValueError(f"ConditionalNode cannot carry tag {self.tag.value}")

    def require_false_value(self) -> "Node":
        """Return the false branch, failing loudly if the data source left it out."""
        if self.false_value is None:
            raise MalformedTreeError(f"{self.tag.value} node has no false branch")
        return self.false_value

    def to_text(self) -> str:
        # Rendered in its base state, same as the filter resolves it
        return str(self.require_false_value())

    def __str__(self) -> str:
        return self.to_text()


@dataclass
class RichText:
    """Ordered group of nodes; renders as the concatenation of its children."""
    children: List["Node"] = field(default_factory=list)
    tag: TagType = field(default=TagType.NONE, init=False)

    @property
    def is_empty(self) -> bool:
        return not self.children

    def to_text(self) -> str:
        return "".join(str(child) for child in self.children)

    def __str__(self) -> str:
        return self.to_text()

    def __iter__(self):
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


Node = Union[TextNode, ParameterNode, ConditionalNode, RichText]


def text(value: str) -> TextNode:
    """Shorthand for a plain text node."""
    return TextNode(TagType.TEXT, value)
