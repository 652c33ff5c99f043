# src/gedcom_viewer/loader/__init__.py

"""
Public interface for the GEDCOM line loader.

Intended usage from other parts of the project and tests:

    from gedcom_viewer.loader import (
        Token,
        GedcomSyntaxError,
        tokenize_line,
        tokenize_text,
        read_gedcom_text,
    )
"""

from __future__ import annotations

from .tokenizer import (
    GedcomSyntaxError,
    Token,
    read_gedcom_text,
    tokenize_line,
    tokenize_text,
)

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "tokenize_line",
    "tokenize_text",
    "read_gedcom_text",
]
