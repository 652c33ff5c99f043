"""
CLI command modules for gedcom_viewer.

Each command module defines Typer-compatible command functions.
"""

from gedcom_viewer.cli.commands.bio import bio_command
from gedcom_viewer.cli.commands.export import export_command
from gedcom_viewer.cli.commands.path import path_command, relation_command
from gedcom_viewer.cli.commands.person import person_command, search_command
from gedcom_viewer.cli.commands.stats import stats_command
from gedcom_viewer.cli.commands.tree import tree_command

__all__ = [
    "bio_command",
    "export_command",
    "path_command",
    "person_command",
    "relation_command",
    "search_command",
    "stats_command",
    "tree_command",
]
