from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from gedcom_viewer.loader.tokenizer import Token
from gedcom_viewer.registry.entities import (
    Event,
    EventType,
    Family,
    GedcomData,
    Person,
    Sex,
)
from gedcom_viewer.registry.link_entities import link_entities


RECORD_PERSON = "INDI"
RECORD_FAMILY = "FAM"

PERSON_EVENT_TAGS: Dict[str, EventType] = {
    "BIRT": EventType.BIRTH,
    "DEAT": EventType.DEATH,
}


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

def split_name(value: str) -> tuple[str, str]:
    """
    Split a ``Given /Surname/`` payload.

    Text before the first slash is the given name, text between the first
    pair of slashes is the surname. Both are trimmed.
    """
    parts = value.split("/")
    given = parts[0].strip()
    surname = parts[1].strip() if len(parts) > 1 else ""
    return given, surname


@dataclass
class ParseStats:
    """Counters reported by the parser run."""
    lines: int = 0
    ignored: int = 0
    dropped: int = 0
    ignored_tags: Dict[str, int] = field(default_factory=dict)

    def note_ignored(self, tag: str) -> None:
        self.ignored += 1
        self.ignored_tags[tag] = self.ignored_tags.get(tag, 0) + 1


@dataclass
class _ParseState:
    """Cursor over the record currently being filled."""
    record_id: Optional[str] = None
    record_kind: Optional[str] = None
    level1_tag: Optional[str] = None

    def open(self, record_id: Optional[str], kind: Optional[str]) -> None:
        self.record_id = record_id
        self.record_kind = kind
        self.level1_tag = None


def _record_header(token: Token) -> tuple[Optional[str], Optional[str]]:
    """
    Id and kind of a level-0 record line, or ``(None, None)``.

    ``0 @I1@ INDI`` is the usual form. Without an @-delimited id the second
    field is taken as the id whatever its shape, so ``0 I1 INDI`` opens
    person ``I1``.
    """
    if token.pointer:
        record_id, kind = token.pointer, token.tag
    else:
        record_id, kind = token.tag, token.value.strip()

    if kind in (RECORD_PERSON, RECORD_FAMILY):
        return record_id, kind
    return None, None


# ----------------------------------------------------------------------
# Line handlers
# ----------------------------------------------------------------------

def _apply_person_line(person: Person, token: Token, state: _ParseState) -> bool:
    """Apply one level-1/2 line to ``person``. Returns False when ignored."""
    value = token.value.strip()

    if token.level == 1:
        tag = token.tag
        state.level1_tag = tag

        if tag == "NAME":
            person.name, person.surname = split_name(value)
        elif tag == "SEX":
            person.sex = Sex.from_gedcom(value)
        elif tag == "FAMC":
            person.famc = value or None
        elif tag == "FAMS":
            if not value:
                return False
            person.fams.append(value)
        elif tag == "BIRT":
            person.birth = Event(type=EventType.BIRTH)
        elif tag == "DEAT":
            person.death = Event(type=EventType.DEATH)
        elif tag != "OBJE":
            return False
        return True

    if token.level != 2:
        return False

    if state.level1_tag in PERSON_EVENT_TAGS:
        event = person.birth if state.level1_tag == "BIRT" else person.death
        if event is None:
            return False
        if token.tag == "DATE":
            event.date = value
        elif token.tag == "PLAC":
            event.place = value
        else:
            return False
        return True

    if state.level1_tag == "OBJE" and token.tag == "FILE":
        # First FILE wins
        if not person.image_url:
            person.image_url = value or None
        return True

    return False


def _apply_family_line(family: Family, token: Token) -> bool:
    """Apply one level-1 line to ``family``. Returns False when ignored."""
    if token.level != 1:
        return False

    value = token.value.strip()

    if token.tag == "HUSB":
        family.husb = value or None
    elif token.tag == "WIFE":
        family.wife = value or None
    elif token.tag == "CHIL":
        if not value:
            return False
        family.children.append(value)
    else:
        return False
    return True


# ----------------------------------------------------------------------
# Registry builder
# ----------------------------------------------------------------------

def build_registry(
    tokens: Iterable[Token],
    stats: Optional[ParseStats] = None,
) -> GedcomData:
    """
    Fold a token stream into a GedcomData graph.

    A level-0 ``INDI`` or ``FAM`` line (``0 @X@ INDI`` or ``0 X INDI``) opens
    a record; any other level-0 line closes tracking so following lines are
    ignored until the next record. Unknown tags never raise; they simply
    populate nothing.
    """
    stats = stats if stats is not None else ParseStats()
    data = GedcomData()
    state = _ParseState()

    for token in tokens:
        stats.lines += 1

        if token.level == 0:
            record_id, kind = _record_header(token)
            if kind == RECORD_PERSON:
                data.register_person(Person(id=record_id))
            elif kind == RECORD_FAMILY:
                data.register_family(Family(id=record_id))
            state.open(record_id, kind)
            continue

        applied = False
        if state.record_kind == RECORD_PERSON:
            applied = _apply_person_line(data.people[state.record_id], token, state)
        elif state.record_kind == RECORD_FAMILY:
            applied = _apply_family_line(data.families[state.record_id], token)

        if not applied:
            stats.note_ignored(token.tag)

    # Resolve person -> family pointers against the finished graph
    link_entities(data)

    return data
