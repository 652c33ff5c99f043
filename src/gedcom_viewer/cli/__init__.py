"""
CLI package for gedcom_viewer.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_viewer.cli.app import app, main

__all__ = [
    "app",
    "main",
]
