from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


# -----------------------------
# Base records (small atoms)
# -----------------------------

class Sex(str, Enum):
    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "U"

    @classmethod
    def from_gedcom(cls, value: Optional[str]) -> "Sex":
        """Map a SEX payload to the enum; anything but M/F is unknown."""
        v = (value or "").strip()
        if v == "M":
            return cls.MALE
        if v == "F":
            return cls.FEMALE
        return cls.UNKNOWN


class EventType(str, Enum):
    BIRTH = "BIRT"
    DEATH = "DEAT"
    MARRIAGE = "MARR"
    OTHER = "OTHER"


@dataclass(slots=True)
class Event:
    """
    Birth / death / marriage event.

    Dates are kept as the free text found in the file; no calendar
    normalization happens here.
    """
    type: EventType
    date: Optional[str] = None
    place: Optional[str] = None

    @property
    def year(self) -> Optional[str]:
        """Last whitespace-separated token of the date ("10 JAN 1980" -> "1980")."""
        if not self.date:
            return None
        parts = self.date.split()
        return parts[-1] if parts else None


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Person:
    id: str
    name: str = "Unknown"
    surname: str = ""
    sex: Sex = Sex.UNKNOWN

    birth: Optional[Event] = None
    death: Optional[Event] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None

    # Family pointers: FAMC (at most one) and FAMS (in file order)
    famc: Optional[str] = None
    fams: List[str] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return " ".join(part for part in (self.name, self.surname) if part)


@dataclass(slots=True)
class Family:
    id: str
    husb: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    marr: Optional[Event] = None

    def partners(self) -> List[str]:
        """Husband then wife, skipping missing references."""
        return [p for p in (self.husb, self.wife) if p]

    def partner_of(self, person_id: str) -> Optional[str]:
        """Return the other partner when ``person_id`` is husband or wife."""
        if person_id == self.husb:
            return self.wife
        if person_id == self.wife:
            return self.husb
        return None


# -----------------------------
# Graph aggregate
# -----------------------------

@dataclass(slots=True)
class GedcomData:
    """
    In-memory family graph indexed by GEDCOM pointer.

    People and families only reference each other by id; every lookup goes
    through these maps so inconsistent input can never create owning cycles.
    """
    people: Dict[str, Person] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)

    def register_person(self, person: Person) -> None:
        self.people[person.id] = person

    def register_family(self, family: Family) -> None:
        self.families[family.id] = family

    def get_person(self, person_id: Optional[str]) -> Optional[Person]:
        if not person_id:
            return None
        return self.people.get(person_id)

    def get_family(self, family_id: Optional[str]) -> Optional[Family]:
        if not family_id:
            return None
        return self.families.get(family_id)

    def parents_of(self, person_id: str) -> List[str]:
        """Father then mother of the person's FAMC family (known people only)."""
        person = self.get_person(person_id)
        family = self.get_family(person.famc) if person else None
        if family is None:
            return []
        return [p for p in family.partners() if p in self.people]

    def partner_families(self, person_id: str) -> List[str]:
        """
        Families where the person is husband or wife.

        The person's own FAMS entries come first, then any other family naming
        them as HUSB/WIFE, in file order. Unknown family ids are skipped.
        """
        person = self.get_person(person_id)
        if person is None:
            return []
        ordered = [f for f in person.fams if f in self.families]
        for fam_id, family in self.families.items():
            if fam_id not in ordered and person_id in (family.husb, family.wife):
                ordered.append(fam_id)
        return ordered

    def is_parent(self, parent_id: str, child_id: str) -> bool:
        return parent_id in self.parents_of(child_id)

    def are_spouses(self, a: str, b: str) -> bool:
        """True when ``a`` and ``b`` are husband and wife of a shared family."""
        if a == b:
            return False
        for fam_id in self.partner_families(a):
            if self.families[fam_id].partner_of(a) == b:
                return True
        return False


# -----------------------------
# Derived projection
# -----------------------------

@dataclass
class TreeNode:
    """
    One node of an ancestor or descendant diagram.

    ``is_spouse`` marks a partner injected next to blood descendants so that a
    traced path crossing a marriage stays connected.
    """
    id: str
    name: str
    data: Person
    children: List["TreeNode"] = field(default_factory=list)
    is_spouse: bool = False

    @classmethod
    def for_person(cls, person: Person) -> "TreeNode":
        return cls(id=person.id, name=person.display_name, data=person)

    def iter_nodes(self):
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def child_ids(self) -> List[str]:
        return [c.id for c in self.children]
