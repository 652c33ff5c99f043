from __future__ import annotations

from gedcom_viewer.logging import get_logger
from gedcom_viewer.registry.entities import GedcomData

log = get_logger(__name__)


def link_entities(data: GedcomData) -> None:
    """
    Cross-record pointer resolution, run once the whole file has been read.

    Design:
      - line handlers stay dumb: they record pointers as written
      - this pass drops person -> family pointers naming no known family
      - duplicate FAMS pointers collapse to their first occurrence
      - family -> person pointers are left alone; traversal skips
        references it cannot resolve

    Idempotent.
    """
    dangling = 0

    for person in data.people.values():
        if person.famc and person.famc not in data.families:
            log.debug("%s: FAMC %s not found, dropped", person.id, person.famc)
            person.famc = None
            dangling += 1

        kept = []
        for fam_id in person.fams:
            if fam_id not in data.families:
                log.debug("%s: FAMS %s not found, dropped", person.id, fam_id)
                dangling += 1
                continue
            if fam_id not in kept:
                kept.append(fam_id)
        person.fams[:] = kept

    if dangling:
        log.info("Dropped %d dangling family reference(s)", dangling)
