import json

from gedcom_viewer.exporter import (
    export_graph_json,
    graph_to_dict,
    serialize_graph_to_json_string,
    tree_to_dict,
)
from gedcom_viewer.traversal import build_descendant_tree


def test_graph_to_dict_shape(family):
    out = graph_to_dict(family)

    assert out["counts"] == {"people": 8, "families": 3}
    joao = out["people"]["@I1@"]
    assert joao["sex"] == "M"
    assert joao["birth"] == {"type": "BIRT", "date": "10 JAN 1980", "place": "São Paulo, Brasil"}
    assert joao["fams"] == ["@F1@"]
    assert out["families"]["@F2@"]["children"] == ["@I1@", "@I8@"]


def test_serialize_compact_and_pretty(family):
    compact = serialize_graph_to_json_string(family, indent=None)
    pretty = serialize_graph_to_json_string(family, indent=2)

    assert "\n" not in compact
    assert "\n" in pretty
    assert json.loads(compact) == json.loads(pretty)
    assert "João" in compact


def test_export_graph_json_writes_file(family, tmp_path):
    out = tmp_path / "nested" / "family.json"
    export_graph_json(family, out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert set(data["people"]) == set(family.people)


def test_tree_to_dict_marks_spouses(family):
    tree = build_descendant_tree(family, "@I1@", 2, ["@I2@", "@I1@"])
    out = tree_to_dict(tree)

    assert out["id"] == "@I1@"
    assert out["name"] == "João Silva"
    assert [c["id"] for c in out["children"]] == ["@I3@", "@I2@"]
    assert "is_spouse" not in out["children"][0]
    assert out["children"][1]["is_spouse"] is True
