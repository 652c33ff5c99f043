# src/gedcom_viewer/relationships/labels.py

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple

from gedcom_viewer.registry.entities import Sex


class Kinship(str, Enum):
    SELF = "self"
    SPOUSE = "spouse"
    CHILD = "child"
    GRANDCHILD = "grandchild"
    GREAT_GRANDCHILD = "great_grandchild"
    DESCENDANT = "descendant"
    PARENT = "parent"
    GRANDPARENT = "grandparent"
    GREAT_GRANDPARENT = "great_grandparent"
    ANCESTOR = "ancestor"
    SIBLING = "sibling"
    UNCLE_AUNT = "uncle_aunt"
    NEPHEW_NIECE = "nephew_niece"
    GREAT_UNCLE_AUNT = "great_uncle_aunt"
    GRAND_NEPHEW_NIECE = "grand_nephew_niece"
    FIRST_COUSIN = "first_cousin"
    SECOND_COUSIN = "second_cousin"
    DISTANT_COUSIN = "distant_cousin"
    BLOOD_RELATIVE = "blood_relative"
    IN_LAW = "in_law"
    NONE = "none"


# (masculine, feminine, unknown sex)
LABELS_PT: Dict[Kinship, Tuple[str, str, str]] = {
    Kinship.SELF: ("Própria pessoa", "Própria pessoa", "Própria pessoa"),
    Kinship.SPOUSE: ("Marido", "Esposa", "Cônjuge"),
    Kinship.CHILD: ("Filho", "Filha", "Filho(a)"),
    Kinship.GRANDCHILD: ("Neto", "Neta", "Neto(a)"),
    Kinship.GREAT_GRANDCHILD: ("Bisneto", "Bisneta", "Bisneto(a)"),
    Kinship.DESCENDANT: (
        "Descendente de {n}ª geração",
        "Descendente de {n}ª geração",
        "Descendente de {n}ª geração",
    ),
    Kinship.PARENT: ("Pai", "Mãe", "Pai/Mãe"),
    Kinship.GRANDPARENT: ("Avô", "Avó", "Avô/Avó"),
    Kinship.GREAT_GRANDPARENT: ("Bisavô", "Bisavó", "Bisavô/Bisavó"),
    Kinship.ANCESTOR: (
        "Ancestral de {n}ª geração",
        "Ancestral de {n}ª geração",
        "Ancestral de {n}ª geração",
    ),
    Kinship.SIBLING: ("Irmão", "Irmã", "Irmão/ã"),
    Kinship.UNCLE_AUNT: ("Tio", "Tia", "Tio(a)"),
    Kinship.NEPHEW_NIECE: ("Sobrinho", "Sobrinha", "Sobrinho(a)"),
    Kinship.GREAT_UNCLE_AUNT: ("Tio-avô", "Tia-avó", "Tio(a)-avô(ó)"),
    Kinship.GRAND_NEPHEW_NIECE: ("Sobrinho-neto", "Sobrinha-neta", "Sobrinho(a)-neto(a)"),
    Kinship.FIRST_COUSIN: ("Primo de 1º grau", "Prima de 1º grau", "Primo(a) de 1º grau"),
    Kinship.SECOND_COUSIN: ("Primo de 2º grau", "Prima de 2º grau", "Primo(a) de 2º grau"),
    Kinship.DISTANT_COUSIN: ("Primo distante", "Prima distante", "Primo(a) distante"),
    Kinship.BLOOD_RELATIVE: ("Parente consanguíneo", "Parente consanguínea", "Parente consanguíneo(a)"),
    Kinship.IN_LAW: ("Parente por afinidade", "Parente por afinidade", "Parente por afinidade"),
    Kinship.NONE: ("Sem parentesco", "Sem parentesco", "Sem parentesco"),
}


def classify_distance(steps_up: int, steps_down: int) -> Tuple[Kinship, Optional[int]]:
    """
    Map (steps up from base to the common ancestor, steps down to target)
    to a kinship band. The second item is the generation count for the
    open-ended descendant/ancestor bands.
    """
    if steps_up == 0:
        if steps_down == 1:
            return Kinship.CHILD, None
        if steps_down == 2:
            return Kinship.GRANDCHILD, None
        if steps_down == 3:
            return Kinship.GREAT_GRANDCHILD, None
        if steps_down > 3:
            return Kinship.DESCENDANT, steps_down
        return Kinship.SELF, None

    if steps_down == 0:
        if steps_up == 1:
            return Kinship.PARENT, None
        if steps_up == 2:
            return Kinship.GRANDPARENT, None
        if steps_up == 3:
            return Kinship.GREAT_GRANDPARENT, None
        return Kinship.ANCESTOR, steps_up

    bands = {
        (1, 1): Kinship.SIBLING,
        (2, 1): Kinship.UNCLE_AUNT,
        (1, 2): Kinship.NEPHEW_NIECE,
        (3, 1): Kinship.GREAT_UNCLE_AUNT,
        (1, 3): Kinship.GRAND_NEPHEW_NIECE,
        (2, 2): Kinship.FIRST_COUSIN,
        (3, 3): Kinship.SECOND_COUSIN,
    }
    kind = bands.get((steps_up, steps_down))
    if kind is not None:
        return kind, None
    if steps_up > 2 and steps_down > 2:
        return Kinship.DISTANT_COUSIN, None
    return Kinship.BLOOD_RELATIVE, None


def render_label(kind: Kinship, sex: Sex = Sex.UNKNOWN, generation: Optional[int] = None) -> str:
    """Portuguese label for ``kind``, gendered by the target's sex."""
    masculine, feminine, neutral = LABELS_PT[kind]
    if sex is Sex.MALE:
        text = masculine
    elif sex is Sex.FEMALE:
        text = feminine
    else:
        text = neutral
    return text.format(n=generation) if generation is not None else text
