# src/gedcom_viewer/traversal/paths.py

"""
Breadth-first walks over the family graph.

Every function here only follows id references through ``GedcomData`` and
keeps its own visited set, so malformed input (a person listed as their own
ancestor, dangling pointers) cannot make it loop or fail.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gedcom_viewer.registry.entities import GedcomData, Person


def get_siblings(data: GedcomData, person_id: str) -> List[Person]:
    """
    Other children of the person's FAMC family.

    Empty when the person is unknown or has no recorded family as a child.
    Unknown child ids are skipped.
    """
    person = data.get_person(person_id)
    if person is None or not person.famc:
        return []

    family = data.get_family(person.famc)
    if family is None:
        return []

    return [
        data.people[child_id]
        for child_id in family.children
        if child_id != person_id and child_id in data.people
    ]


def ancestor_distances(data: GedcomData, start_id: str) -> Dict[str, int]:
    """
    Minimum number of parent steps from ``start_id`` to each reachable ancestor.

    The start itself is included at distance 0. Only parent edges
    (husband/wife of the FAMC family) are followed. Insertion order is BFS
    order, which the relationship resolver relies on for tie-breaking.
    """
    if start_id not in data.people:
        return {}

    distances: Dict[str, int] = {start_id: 0}
    queue = deque([start_id])

    while queue:
        current = queue.popleft()
        for parent_id in data.parents_of(current):
            if parent_id in distances:
                continue
            distances[parent_id] = distances[current] + 1
            queue.append(parent_id)

    return distances


@dataclass
class FamilyLinks:
    """
    Two-way family membership for the undirected search.

    A person belongs to a family when either side records the link: FAMC or
    CHIL for children, FAMS or HUSB/WIFE for partners. ``members`` lists a
    family's husband, wife, other partners and then its children;
    ``families`` lists a person's child families and then partner families.
    """
    members: Dict[str, List[str]] = field(default_factory=dict)
    families: Dict[str, List[str]] = field(default_factory=dict)


def _join(index: Dict[str, List[str]], key: str, value: str) -> None:
    bucket = index.setdefault(key, [])
    if value not in bucket:
        bucket.append(value)


def family_links(data: GedcomData) -> FamilyLinks:
    child_of: Dict[str, List[str]] = {}
    partner_in: Dict[str, List[str]] = {}

    for person_id, person in data.people.items():
        if person.famc in data.families:
            _join(child_of, person_id, person.famc)
        for fam_id in person.fams:
            if fam_id in data.families:
                _join(partner_in, person_id, fam_id)

    partners: Dict[str, List[str]] = {}
    children: Dict[str, List[str]] = {}
    for fam_id, family in data.families.items():
        for partner_id in family.partners():
            if partner_id in data.people:
                _join(partner_in, partner_id, fam_id)
                _join(partners, fam_id, partner_id)
        for child_id in family.children:
            if child_id in data.people:
                _join(child_of, child_id, fam_id)
                _join(children, fam_id, child_id)

    # Links recorded only on the person side
    for person_id in data.people:
        for fam_id in partner_in.get(person_id, ()):
            _join(partners, fam_id, person_id)
        for fam_id in child_of.get(person_id, ()):
            _join(children, fam_id, person_id)

    links = FamilyLinks()
    for fam_id in data.families:
        links.members[fam_id] = partners.get(fam_id, []) + children.get(fam_id, [])
    for person_id in data.people:
        for fam_id in child_of.get(person_id, []) + partner_in.get(person_id, []):
            _join(links.families, person_id, fam_id)
    return links


def neighbours(
    data: GedcomData,
    person_id: str,
    links: Optional[FamilyLinks] = None,
) -> List[str]:
    """
    Adjacent people in the undirected relationship view, in search order.

    Order: the members of each family the person is a child of (husband,
    wife, then the other children), FAMC first; then the members of each
    family the person is a partner in. Two people are adjacent exactly when
    they share a family, so the relation is symmetric. The person itself is
    skipped; repeats keep their first position.
    """
    if person_id not in data.people:
        return []

    if links is None:
        links = family_links(data)

    ordered: List[str] = []
    for fam_id in links.families.get(person_id, ()):
        for member_id in links.members[fam_id]:
            if member_id != person_id and member_id not in ordered:
                ordered.append(member_id)
    return ordered


def find_shortest_path(data: GedcomData, start_id: str, target_id: str) -> List[str]:
    """
    Shortest chain of people linking ``start_id`` to ``target_id``.

    Unit-weight BFS over parent/child, sibling and spouse links. Returns the
    ids from start to target inclusive, ``[start_id]`` when both are the same
    person and ``[]`` when either id is unknown or no chain exists. Among
    equally short chains the first one found in ``neighbours`` order wins.
    """
    if start_id not in data.people or target_id not in data.people:
        return []
    if start_id == target_id:
        return [start_id]

    links = family_links(data)
    came_from: Dict[str, Optional[str]] = {start_id: None}
    queue = deque([start_id])

    while queue:
        current = queue.popleft()
        for nxt in neighbours(data, current, links):
            if nxt in came_from:
                continue
            came_from[nxt] = current
            if nxt == target_id:
                return _unwind(came_from, target_id)
            queue.append(nxt)

    return []


def _unwind(came_from: Dict[str, Optional[str]], target_id: str) -> List[str]:
    path: List[str] = []
    node: Optional[str] = target_id
    while node is not None:
        path.append(node)
        node = came_from[node]
    path.reverse()
    return path
