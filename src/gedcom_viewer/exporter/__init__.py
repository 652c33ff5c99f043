"""
Exporter package.

Re-exports the JSON export entry points used by the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    export_graph_json,
    graph_to_dict,
    serialize_graph_to_json_string,
    tree_to_dict,
)

__all__ = [
    "export_graph_json",
    "graph_to_dict",
    "serialize_graph_to_json_string",
    "tree_to_dict",
]
