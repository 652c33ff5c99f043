"""
Logging package for ``gedcom_viewer``.

Use ``get_logger(__name__)`` in modules to inherit shared handlers and write to a
module-specific log file.
"""

from .logger import LogSettings, get_logger

__all__ = [
    "LogSettings",
    "get_logger",
]
