"""
gedcom_viewer

Interactive GEDCOM family tree viewer: parse a GEDCOM file into an
id-keyed family graph, project ancestor and descendant trees, trace the
shortest path between two relatives and name their relationship.
"""

from gedcom_viewer.core import EmptyGraphError, UnknownPersonError, ViewerError, ViewerSession
from gedcom_viewer.parser_core import GEDCOMParser, parse_gedcom, parse_gedcom_file
from gedcom_viewer.registry.entities import Event, Family, GedcomData, Person, Sex, TreeNode
from gedcom_viewer.relationships import get_path_peak, get_relationship_label
from gedcom_viewer.traversal import (
    build_ancestor_tree,
    build_descendant_tree,
    find_shortest_path,
    get_siblings,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyGraphError",
    "Event",
    "Family",
    "GEDCOMParser",
    "GedcomData",
    "Person",
    "Sex",
    "TreeNode",
    "UnknownPersonError",
    "ViewerError",
    "ViewerSession",
    "build_ancestor_tree",
    "build_descendant_tree",
    "find_shortest_path",
    "get_path_peak",
    "get_relationship_label",
    "get_siblings",
    "parse_gedcom",
    "parse_gedcom_file",
]
