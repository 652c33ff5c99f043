# src/gedcom_viewer/traversal/trees.py

"""
Ancestor and descendant projections of the family graph.

Both builders return a fresh ``TreeNode`` hierarchy (or ``None``) for a root
id and a generation bound. Depth counts generations from 0 at the root; a
branch stops when its depth exceeds ``max_depth`` or its id is unknown.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional, Sequence

from gedcom_viewer.registry.entities import GedcomData, TreeNode


# ---------------------------------------------------------------------------
# Ancestors
# ---------------------------------------------------------------------------

def build_ancestor_tree(
    data: GedcomData,
    root_id: str,
    max_depth: int,
) -> Optional[TreeNode]:
    """
    Parents-first tree: each node's children are its father then mother.

    ``build_ancestor_tree(data, pid, 0)`` is a single childless node; a
    negative bound or unknown id gives ``None``.
    """
    return _ascend(data, root_id, 0, max_depth, frozenset())


def _ascend(
    data: GedcomData,
    person_id: str,
    depth: int,
    max_depth: int,
    lineage: FrozenSet[str],
) -> Optional[TreeNode]:
    person = data.get_person(person_id)
    if person is None or depth > max_depth:
        return None

    node = TreeNode.for_person(person)
    branch = lineage | {person_id}

    family = data.get_family(person.famc)
    if family is None:
        return node

    for parent_id in (family.husb, family.wife):
        if not parent_id or parent_id in branch:
            continue
        parent = _ascend(data, parent_id, depth + 1, max_depth, branch)
        if parent is not None:
            node.children.append(parent)

    return node


# ---------------------------------------------------------------------------
# Descendants
# ---------------------------------------------------------------------------

def build_descendant_tree(
    data: GedcomData,
    root_id: str,
    max_depth: int,
    highlight_path: Optional[Sequence[str]] = None,
) -> Optional[TreeNode]:
    """
    Children-first tree over every family where the person is a partner
    (listed by FAMS or named as HUSB/WIFE).

    Children are deduplicated by id, so a child listed in two families of
    the same parent shows up once.

    With ``highlight_path``, a partner that sits next to the current person
    on the path (and is not already one of its blood children) is appended
    after the children with ``is_spouse=True``. This keeps a traced path
    connected when it crosses a marriage instead of a parent/child link.
    """
    links = _path_links(highlight_path) if highlight_path else {}
    return _descend(data, root_id, 0, max_depth, links, frozenset(), frozenset())


def _path_links(path: Sequence[str]) -> Dict[str, List[str]]:
    """Map each id on the path to its previous/next ids."""
    links: Dict[str, List[str]] = {}
    for i, person_id in enumerate(path):
        adjacent = links.setdefault(person_id, [])
        for j in (i - 1, i + 1):
            if 0 <= j < len(path) and path[j] not in adjacent:
                adjacent.append(path[j])
    return links


def _child_ids(data: GedcomData, person_id: str) -> List[str]:
    ordered: List[str] = []
    for fam_id in data.partner_families(person_id):
        for child_id in data.families[fam_id].children:
            if child_id not in ordered:
                ordered.append(child_id)
    return ordered


def _descend(
    data: GedcomData,
    person_id: str,
    depth: int,
    max_depth: int,
    links: Dict[str, List[str]],
    lineage: FrozenSet[str],
    exclude: FrozenSet[str],
) -> Optional[TreeNode]:
    person = data.get_person(person_id)
    if person is None or depth > max_depth:
        return None

    node = TreeNode.for_person(person)
    branch = lineage | {person_id}

    child_ids = [
        c for c in _child_ids(data, person_id)
        if c not in exclude and c not in branch
    ]
    for child_id in child_ids:
        child = _descend(data, child_id, depth + 1, max_depth, links, branch, frozenset())
        if child is not None:
            node.children.append(child)

    # Spouse injection for the highlighted path
    for other_id in links.get(person_id, ()):
        if other_id in child_ids or other_id in branch:
            continue
        if not data.are_spouses(person_id, other_id):
            continue
        spouse = _descend(
            data, other_id, depth + 1, max_depth, links, branch, frozenset(child_ids)
        )
        if spouse is not None:
            spouse.is_spouse = True
            node.children.append(spouse)

    return node
