class ViewerError(Exception):
    """Base exception for viewer session failures."""


class EmptyGraphError(ViewerError):
    """Raised when an operation needs people but no graph is loaded."""


class UnknownPersonError(ViewerError):
    """Raised when a person id is not present in the loaded graph."""
