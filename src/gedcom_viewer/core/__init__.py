from .exceptions import EmptyGraphError, UnknownPersonError, ViewerError
from .session import ViewerSession

__all__ = [
    "EmptyGraphError",
    "UnknownPersonError",
    "ViewerError",
    "ViewerSession",
]
