# tests/test_trees.py

from __future__ import annotations

from gedcom_viewer.parser_core import parse_gedcom
from gedcom_viewer.registry.entities import Family, GedcomData, Person
from gedcom_viewer.traversal import build_ancestor_tree, build_descendant_tree


def _shape(node):
    """(id, [children...]) with spouse nodes suffixed by '*'."""
    label = node.id + ("*" if node.is_spouse else "")
    return (label, [_shape(c) for c in node.children])


def test_ancestor_tree_father_then_mother(family) -> None:
    tree = build_ancestor_tree(family, "@I3@", 2)

    assert _shape(tree) == (
        "@I3@",
        [
            ("@I1@", [("@I4@", []), ("@I5@", [])]),
            ("@I2@", []),
        ],
    )
    assert tree.name == "Pedro Silva"
    assert tree.data is family.people["@I3@"]


def test_ancestor_tree_depth_bounds(family) -> None:
    single = build_ancestor_tree(family, "@I3@", 0)
    assert single is not None
    assert single.children == []

    one = build_ancestor_tree(family, "@I3@", 1)
    assert _shape(one) == ("@I3@", [("@I1@", []), ("@I2@", [])])

    assert build_ancestor_tree(family, "@I3@", -1) is None
    assert build_ancestor_tree(family, "@I404@", 3) is None


def test_descendant_tree(family) -> None:
    tree = build_descendant_tree(family, "@I6@", 3)
    assert _shape(tree) == (
        "@I6@",
        [("@I4@", [("@I1@", [("@I3@", [])]), ("@I8@", [])])],
    )

    shallow = build_descendant_tree(family, "@I6@", 2)
    assert _shape(shallow) == (
        "@I6@",
        [("@I4@", [("@I1@", []), ("@I8@", [])])],
    )


def test_descendant_tree_dedupes_child_of_two_marriages() -> None:
    data = GedcomData()
    data.register_person(Person(id="@P@", fams=["@F1@", "@F2@"]))
    data.register_person(Person(id="@C@", famc="@F1@"))
    data.register_person(Person(id="@D@", famc="@F2@"))
    data.register_family(Family(id="@F1@", husb="@P@", children=["@C@"]))
    data.register_family(Family(id="@F2@", husb="@P@", children=["@C@", "@D@"]))

    tree = build_descendant_tree(data, "@P@", 2)
    assert tree.child_ids() == ["@C@", "@D@"]


def test_descendant_tree_injects_spouse_on_highlighted_path(family) -> None:
    plain = build_descendant_tree(family, "@I4@", 3)
    assert _shape(plain)[1][0] == ("@I1@", [("@I3@", [])])

    tree = build_descendant_tree(family, "@I4@", 3, ["@I3@", "@I1@", "@I2@"])
    assert _shape(tree) == (
        "@I4@",
        [("@I1@", [("@I3@", []), ("@I2@*", [])]), ("@I8@", [])],
    )


def test_injected_spouse_at_root(family) -> None:
    tree = build_descendant_tree(family, "@I1@", 2, ["@I2@", "@I1@"])
    assert _shape(tree) == ("@I1@", [("@I3@", []), ("@I2@*", [])])


def test_path_neighbour_that_is_not_a_spouse_is_not_injected(family) -> None:
    tree = build_descendant_tree(family, "@I1@", 2, ["@I8@", "@I1@"])
    assert _shape(tree) == ("@I1@", [("@I3@", [])])


def test_tree_nodes_are_rebuilt_each_call(family) -> None:
    a = build_descendant_tree(family, "@I4@", 3)
    b = build_descendant_tree(family, "@I4@", 3)
    assert a is not b
    assert _shape(a) == _shape(b)


def test_cyclic_input_terminates() -> None:
    data = parse_gedcom(
        "\n".join(
            [
                "0 @I1@ INDI",
                "1 FAMC @F1@",
                "1 FAMS @F1@",
                "0 @I2@ INDI",
                "1 FAMC @F1@",
                "1 FAMS @F2@",
                "0 @F1@ FAM",
                "1 HUSB @I1@",
                "1 CHIL @I1@",
                "1 CHIL @I2@",
                "0 @F2@ FAM",
                "1 HUSB @I2@",
                "1 CHIL @I1@",
            ]
        )
    )

    ancestors = build_ancestor_tree(data, "@I1@", 50)
    assert _shape(ancestors) == ("@I1@", [])

    descendants = build_descendant_tree(data, "@I1@", 50)
    assert _shape(descendants) == ("@I1@", [("@I2@", [])])


def test_descendants_of_partner_named_only_by_family_record() -> None:
    data = parse_gedcom(
        "\n".join(
            [
                "0 @A@ INDI",
                "0 @C@ INDI",
                "1 FAMC @F1@",
                "0 @W@ INDI",
                "0 @F1@ FAM",
                "1 HUSB @A@",
                "1 WIFE @W@",
                "1 CHIL @C@",
            ]
        )
    )

    assert build_descendant_tree(data, "@A@", 3).child_ids() == ["@C@"]
    assert data.are_spouses("@A@", "@W@")
    assert data.partner_families("@W@") == ["@F1@"]

    tree = build_descendant_tree(data, "@A@", 3, ["@C@", "@A@", "@W@"])
    assert _shape(tree) == ("@A@", [("@C@", []), ("@W@*", [])])
