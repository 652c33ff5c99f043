"""
Person-centred lookups used by the person detail view and search.
"""

from __future__ import annotations

from typing import List

from gedcom_viewer.registry.entities import GedcomData, Person


def find_first_person_id(data: GedcomData) -> str:
    """Id of the first person read from the file, or "" for an empty graph."""
    return next(iter(data.people), "")


def get_spouses(data: GedcomData, person_id: str) -> List[Person]:
    """The other partner of every family where the person is husband or wife."""
    spouses: List[Person] = []
    for fam_id in data.partner_families(person_id):
        spouse = data.get_person(data.families[fam_id].partner_of(person_id))
        if spouse is not None:
            spouses.append(spouse)
    return spouses


def get_children(data: GedcomData, person_id: str) -> List[Person]:
    """Children of every partner family, in family then file order."""
    children: List[Person] = []
    for fam_id in data.partner_families(person_id):
        for child_id in data.families[fam_id].children:
            child = data.get_person(child_id)
            if child is not None:
                children.append(child)
    return children


def get_parents(data: GedcomData, person_id: str) -> List[Person]:
    return [data.people[p] for p in data.parents_of(person_id)]


def search_people(data: GedcomData, query: str) -> List[Person]:
    """
    Case-insensitive substring match on display name or id.

    An empty query matches nobody.
    """
    needle = query.strip().casefold()
    if not needle:
        return []

    return [
        person
        for person in data.people.values()
        if needle in person.display_name.casefold() or needle in person.id.casefold()
    ]
