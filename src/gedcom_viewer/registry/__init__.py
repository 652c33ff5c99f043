from __future__ import annotations

from .entities import (
    Event,
    EventType,
    Family,
    GedcomData,
    Person,
    Sex,
    TreeNode,
)

__all__ = [
    "Event",
    "EventType",
    "Family",
    "GedcomData",
    "Person",
    "Sex",
    "TreeNode",
]
