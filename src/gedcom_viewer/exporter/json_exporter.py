"""
json_exporter.py
Structured JSON exporter for the family graph and tree projections.

This exporter:
- Converts dataclasses, enums and containers to plain dicts/lists
- Preserves the graph's id-keyed layout for downstream processing
- Is deterministic (insertion order is kept)
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from gedcom_viewer.logging import get_logger
from gedcom_viewer.registry.entities import GedcomData, TreeNode

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - Enums -> their value
    - dataclasses -> dict (recursively, slots-safe)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float)):
        return obj

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, str):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _to_json_compatible(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def graph_to_dict(data: GedcomData) -> Dict[str, Any]:
    """
    Convert the in-memory graph into a JSON-safe dict.
    """
    return {
        "counts": {
            "people": len(data.people),
            "families": len(data.families),
        },
        "people": {pid: _to_json_compatible(p) for pid, p in data.people.items()},
        "families": {fid: _to_json_compatible(f) for fid, f in data.families.items()},
    }


def tree_to_dict(node: TreeNode) -> Dict[str, Any]:
    """Nested dict for a tree projection; the person payload is kept whole."""
    out: Dict[str, Any] = {
        "id": node.id,
        "name": node.name,
        "data": _to_json_compatible(node.data),
        "children": [tree_to_dict(c) for c in node.children],
    }
    if node.is_spouse:
        out["is_spouse"] = True
    return out


def serialize_graph_to_json_string(data: GedcomData, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(graph_to_dict(data), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(graph_to_dict(data), indent=indent, ensure_ascii=False)


def export_graph_json(data: GedcomData, output_path: str | Path, indent: int | None = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting graph JSON to: %s (INDI=%d, FAM=%d)",
        output_path,
        len(data.people),
        len(data.families),
    )

    json_str = serialize_graph_to_json_string(data, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
