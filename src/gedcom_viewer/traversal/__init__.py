"""
Graph traversal library: tree projections and breadth-first searches.
"""

from .paths import (
    ancestor_distances,
    FamilyLinks,
    family_links,
    find_shortest_path,
    get_siblings,
    neighbours,
)
from .trees import build_ancestor_tree, build_descendant_tree

__all__ = [
    "ancestor_distances",
    "build_ancestor_tree",
    "build_descendant_tree",
    "FamilyLinks",
    "family_links",
    "find_shortest_path",
    "get_siblings",
    "neighbours",
]
