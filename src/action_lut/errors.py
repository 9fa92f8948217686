"""Exceptions raised by the action LUT generator."""


class MalformedTreeError(ValueError):
    """Raised when a description tree breaks the node contract (e.g. a conditional without a branch)."""
    pass


class ActionDataError(ValueError):
    """Raised when an exported action table is not in the expected shape."""
    pass
