# tests/test_parser.py

from __future__ import annotations

from gedcom_viewer.parser_core import GEDCOMParser, parse_gedcom
from gedcom_viewer.registry.build_registry import split_name
from gedcom_viewer.registry.entities import Sex
from gedcom_viewer.sample import SAMPLE_GEDCOM


def test_sample_counts(family) -> None:
    assert len(family.people) == 8
    assert len(family.families) == 3
    assert list(family.people)[0] == "@I1@"


def test_person_fields_populated(family) -> None:
    joao = family.people["@I1@"]

    assert joao.name == "João"
    assert joao.surname == "Silva"
    assert joao.display_name == "João Silva"
    assert joao.sex is Sex.MALE
    assert joao.birth is not None
    assert joao.birth.date == "10 JAN 1980"
    assert joao.birth.place == "São Paulo, Brasil"
    assert joao.birth.year == "1980"
    assert joao.death is None
    assert joao.famc == "@F2@"
    assert joao.fams == ["@F1@"]
    assert joao.image_url.startswith("https://images.unsplash.com/")


def test_death_event_without_place(family) -> None:
    manuel = family.people["@I6@"]
    assert manuel.death is not None
    assert manuel.death.date == "1990"
    assert manuel.death.place is None


def test_family_fields_populated(family) -> None:
    f2 = family.families["@F2@"]
    assert f2.husb == "@I4@"
    assert f2.wife == "@I5@"
    assert f2.children == ["@I1@", "@I8@"]
    assert f2.marr is None


def test_embedded_sample_matches_mock_file(family) -> None:
    data = parse_gedcom(SAMPLE_GEDCOM)
    assert list(data.people) == list(family.people)
    assert list(data.families) == list(family.families)


def test_split_name_variants() -> None:
    assert split_name("João /Silva/") == ("João", "Silva")
    assert split_name("Cher") == ("Cher", "")
    assert split_name("/Santos/") == ("", "Santos")
    assert split_name("Ana Maria /de Souza/ Jr") == ("Ana Maria", "de Souza")


def test_defaults_for_minimal_person() -> None:
    data = parse_gedcom("0 @I1@ INDI\n")
    person = data.people["@I1@"]

    assert person.name == "Unknown"
    assert person.surname == ""
    assert person.sex is Sex.UNKNOWN
    assert person.fams == []
    assert person.famc is None


def test_unknown_sex_value_maps_to_unknown() -> None:
    data = parse_gedcom("0 @I1@ INDI\n1 SEX X\n")
    assert data.people["@I1@"].sex is Sex.UNKNOWN


def test_first_file_wins_under_obje() -> None:
    text = "\n".join(
        [
            "0 @I1@ INDI",
            "1 OBJE",
            "2 FILE first.jpg",
            "2 FILE second.jpg",
            "1 OBJE",
            "2 FILE third.jpg",
        ]
    )
    data = parse_gedcom(text)
    assert data.people["@I1@"].image_url == "first.jpg"


def test_level2_lines_follow_most_recent_level1_tag() -> None:
    text = "\n".join(
        [
            "0 @I1@ INDI",
            "1 BIRT",
            "2 DATE 1900",
            "1 SEX M",
            "2 DATE 1999",
            "1 DEAT",
            "2 PLAC Lisboa",
        ]
    )
    data = parse_gedcom(text)
    person = data.people["@I1@"]

    assert person.birth.date == "1900"
    assert person.death.date is None
    assert person.death.place == "Lisboa"


def test_non_record_level0_line_closes_tracking() -> None:
    text = "\n".join(
        [
            "0 @I1@ INDI",
            "1 NAME Ana /Silva/",
            "0 @N1@ NOTE some note",
            "1 NAME Someone /Else/",
            "1 SEX F",
        ]
    )
    data = parse_gedcom(text)
    person = data.people["@I1@"]

    assert person.display_name == "Ana Silva"
    assert person.sex is Sex.UNKNOWN


def test_parser_never_raises_on_malformed_input() -> None:
    parser = GEDCOMParser()
    data = parser.parse_text("garbage\n0\n0 @I1@ INDI\n1 NAME Ana /Silva/\n1 _CUSTOM tag\n@@@\n")

    assert list(data.people) == ["@I1@"]
    assert parser.stats.dropped == 3
    assert parser.stats.ignored_tags == {"_CUSTOM": 1}


def test_dangling_family_pointers_are_dropped() -> None:
    text = "\n".join(
        [
            "0 @I1@ INDI",
            "1 FAMC @F9@",
            "1 FAMS @F1@",
            "1 FAMS @F8@",
            "1 FAMS @F1@",
            "0 @F1@ FAM",
            "1 HUSB @I1@",
        ]
    )
    data = parse_gedcom(text)
    person = data.people["@I1@"]

    assert person.famc is None
    assert person.fams == ["@F1@"]


def test_every_person_has_id_and_resolvable_family_refs(family) -> None:
    for pid, person in family.people.items():
        assert pid and person.id == pid
        assert person.famc is None or person.famc in family.families
        assert all(f in family.families for f in person.fams)


def test_record_ids_without_at_signs() -> None:
    data = parse_gedcom(
        "\n".join(
            [
                "0 HEAD",
                "0 I1 INDI",
                "1 NAME Ana /Lima/",
                "1 FAMS F1",
                "0 F1 FAM",
                "1 WIFE I1",
                "0 TRLR",
            ]
        )
    )

    assert list(data.people) == ["I1"]
    assert data.people["I1"].display_name == "Ana Lima"
    assert data.people["I1"].fams == ["F1"]
    assert data.families["F1"].wife == "I1"


def test_level0_line_without_record_kind_opens_nothing() -> None:
    data = parse_gedcom("0 I1 NOTE\n1 NAME Ana /Lima/\n0 @N1@ NOTE text\n")
    assert data.people == {}
    assert data.families == {}
