# src/gedcom_viewer/relationships/resolver.py

"""
Relationship resolution on top of the traversal library.

- ``get_path_peak``: the person to use as diagram root so both ends of a
  traced path stay visible.
- ``classify_relationship`` / ``get_relationship_label``: kinship of a target
  person as seen from a base person.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from gedcom_viewer.logging import get_logger
from gedcom_viewer.registry.entities import GedcomData, Sex
from gedcom_viewer.relationships.labels import Kinship, classify_distance, render_label
from gedcom_viewer.traversal.paths import ancestor_distances, find_shortest_path

log = get_logger(__name__)


def get_path_peak(data: GedcomData, path: Sequence[str]) -> Optional[str]:
    """
    Pick the connecting node of a path.

    1. The first interior node that is a parent of both its predecessor and
       its successor (the apex of an up-then-down path).
    2. Otherwise the first node whose successor is not its parent, i.e. where
       the path stops climbing. A path that only climbs yields its first node.

    This is a heuristic and does not guarantee the lowest common ancestor.
    """
    if not path:
        return None

    for i in range(1, len(path) - 1):
        node = path[i]
        if data.is_parent(node, path[i - 1]) and data.is_parent(node, path[i + 1]):
            return node

    for i in range(len(path) - 1):
        if not data.is_parent(path[i + 1], path[i]):
            return path[i]

    return path[0]


def nearest_common_ancestor(
    data: GedcomData,
    base_id: str,
    target_id: str,
) -> Optional[Tuple[str, int, int]]:
    """
    Common ancestor minimizing the summed distance from both people.

    Returns ``(ancestor_id, steps_up_from_base, steps_down_to_target)`` or
    ``None``. Ties go to the ancestor met first in the base's BFS order.
    """
    base_map = ancestor_distances(data, base_id)
    target_map = ancestor_distances(data, target_id)

    best: Optional[Tuple[str, int, int]] = None
    for ancestor_id, up in base_map.items():
        down = target_map.get(ancestor_id)
        if down is None:
            continue
        if best is None or up + down < best[1] + best[2]:
            best = (ancestor_id, up, down)
    return best


def classify_relationship(
    data: GedcomData,
    base_id: str,
    target_id: str,
) -> Tuple[Kinship, Optional[int]]:
    """
    Kinship band of ``target_id`` relative to ``base_id``.

    The by-marriage fallback uses ``find_shortest_path``, whose search also
    steps between siblings. Children of a family with no recorded husband or
    wife therefore share no ancestor yet are still connected, and come out as
    ``IN_LAW`` rather than ``NONE``.
    """
    if base_id == target_id:
        return Kinship.SELF, None

    if data.are_spouses(base_id, target_id):
        return Kinship.SPOUSE, None

    common = nearest_common_ancestor(data, base_id, target_id)
    if common is not None:
        ancestor_id, up, down = common
        log.debug(
            "%s -> %s via %s (up=%d, down=%d)", base_id, target_id, ancestor_id, up, down
        )
        return classify_distance(up, down)

    if find_shortest_path(data, base_id, target_id):
        return Kinship.IN_LAW, None

    return Kinship.NONE, None


def get_relationship_label(data: GedcomData, base_id: str, target_id: str) -> str:
    """Portuguese kinship term for ``target_id`` as seen from ``base_id``."""
    kind, generation = classify_relationship(data, base_id, target_id)
    target = data.get_person(target_id)
    sex = target.sex if target is not None else Sex.UNKNOWN
    return render_label(kind, sex, generation)
