# tests/test_paths.py

from __future__ import annotations

from gedcom_viewer.parser_core import parse_gedcom
from gedcom_viewer.traversal import (
    ancestor_distances,
    family_links,
    find_shortest_path,
    neighbours,
)


def test_shortest_path_routes_through_shared_parent_family(family) -> None:
    assert find_shortest_path(family, "@I3@", "@I8@") == ["@I3@", "@I1@", "@I8@"]


def test_shortest_path_same_person_and_unknown_ids(family) -> None:
    assert find_shortest_path(family, "@I1@", "@I1@") == ["@I1@"]
    assert find_shortest_path(family, "@I1@", "@I404@") == []
    assert find_shortest_path(family, "@I404@", "@I1@") == []


def test_shortest_path_through_grandparents_and_marriage(family) -> None:
    path = find_shortest_path(family, "@I3@", "@I5@")
    assert path == ["@I3@", "@I1@", "@I5@"]

    path = find_shortest_path(family, "@I2@", "@I6@")
    assert path == ["@I2@", "@I1@", "@I4@", "@I6@"]


def test_child_list_counts_as_parent_edge_both_ways(family) -> None:
    # @I4@ has no FAMC line but @F3@ lists him as CHIL
    assert family.people["@I4@"].famc is None
    assert find_shortest_path(family, "@I4@", "@I6@") == ["@I4@", "@I6@"]
    assert find_shortest_path(family, "@I6@", "@I4@") == ["@I6@", "@I4@"]


def test_consecutive_path_members_are_adjacent(family) -> None:
    links = family_links(family)
    for start in family.people:
        for target in family.people:
            path = find_shortest_path(family, start, target)
            assert path, f"{start} -> {target} should be connected"
            for a, b in zip(path, path[1:]):
                assert b in neighbours(family, a, links)


def test_neighbour_order_parents_before_own_family(family) -> None:
    assert neighbours(family, "@I1@") == ["@I4@", "@I5@", "@I8@", "@I2@", "@I3@"]


def test_unreachable_person_gives_empty_path() -> None:
    data = parse_gedcom(
        "\n".join(
            [
                "0 @I1@ INDI",
                "1 FAMS @F1@",
                "0 @I2@ INDI",
                "1 FAMS @F1@",
                "0 @I3@ INDI",
                "0 @F1@ FAM",
                "1 HUSB @I1@",
                "1 WIFE @I2@",
            ]
        )
    )
    assert find_shortest_path(data, "@I1@", "@I2@") == ["@I1@", "@I2@"]
    assert find_shortest_path(data, "@I1@", "@I3@") == []


def test_ancestor_distances_follow_parent_edges_only(family) -> None:
    distances = ancestor_distances(family, "@I3@")
    assert distances == {"@I3@": 0, "@I1@": 1, "@I2@": 1, "@I4@": 2, "@I5@": 2}
    assert list(distances) == ["@I3@", "@I1@", "@I2@", "@I4@", "@I5@"]
    assert ancestor_distances(family, "@I404@") == {}


def test_self_ancestry_cycle_terminates() -> None:
    data = parse_gedcom(
        "\n".join(
            [
                "0 @I1@ INDI",
                "1 FAMC @F1@",
                "1 FAMS @F1@",
                "0 @F1@ FAM",
                "1 HUSB @I1@",
                "1 CHIL @I1@",
            ]
        )
    )
    assert ancestor_distances(data, "@I1@") == {"@I1@": 0}
    assert neighbours(data, "@I1@") == []
    assert find_shortest_path(data, "@I1@", "@I1@") == ["@I1@"]


PARTNER_SIDE_ONLY = "\n".join(
    [
        "0 @A@ INDI",
        "0 @B@ INDI",
        "1 FAMS @F1@",
        "0 @C@ INDI",
        "1 FAMC @F1@",
        "0 @F1@ FAM",
        "1 HUSB @A@",
        "1 CHIL @C@",
    ]
)


def test_partner_named_only_by_family_record_is_reachable_both_ways() -> None:
    # @A@ has no FAMS line; @F1@ names him as HUSB
    data = parse_gedcom(PARTNER_SIDE_ONLY)

    assert find_shortest_path(data, "@C@", "@A@") == ["@C@", "@A@"]
    assert find_shortest_path(data, "@A@", "@C@") == ["@A@", "@C@"]


def test_partner_named_only_by_fams_line_is_adjacent() -> None:
    # @B@ lists FAMS @F1@ but the family has no WIFE line
    data = parse_gedcom(PARTNER_SIDE_ONLY)
    links = family_links(data)

    assert links.members["@F1@"] == ["@A@", "@B@", "@C@"]
    assert neighbours(data, "@A@", links) == ["@B@", "@C@"]
    assert neighbours(data, "@B@", links) == ["@A@", "@C@"]
    assert neighbours(data, "@C@", links) == ["@A@", "@B@"]


def test_path_search_is_symmetric(family) -> None:
    partial = parse_gedcom(PARTNER_SIDE_ONLY)
    for data in (family, partial):
        links = family_links(data)
        for a in data.people:
            for b in neighbours(data, a, links):
                assert a in neighbours(data, b, links)
            for b in data.people:
                forward = find_shortest_path(data, a, b)
                backward = find_shortest_path(data, b, a)
                assert bool(forward) == bool(backward)
                assert len(forward) == len(backward)
