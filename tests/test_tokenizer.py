# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_viewer.loader import GedcomSyntaxError, read_gedcom_text, tokenize_line, tokenize_text
from gedcom_viewer.utils import mock_file_path


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_keeps_value_spaces() -> None:
    line = "1 NAME João /Silva/"
    token = tokenize_line(line, lineno=10)
    assert token.level == 1
    assert token.pointer is None
    assert token.tag == "NAME"
    assert token.value == "João /Silva/"
    assert token.raw == line


def test_tokenize_line_with_bom_on_first_line() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_invalid_level_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("X HEAD", lineno=1)


def test_tokenize_line_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 ", lineno=1)


def test_tokenize_line_pointer_without_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 @I1@", lineno=1)


def test_tokenize_text_skips_blank_lines() -> None:
    tokens = list(tokenize_text("0 HEAD\n\n   \n0 TRLR\n"))
    assert [t.tag for t in tokens] == ["HEAD", "TRLR"]
    assert [t.lineno for t in tokens] == [1, 4]


def test_tokenize_text_reports_and_skips_malformed_lines() -> None:
    errors = []
    tokens = list(tokenize_text("0 HEAD\nbroken\n0 TRLR", on_error=errors.append))

    assert [t.tag for t in tokens] == ["HEAD", "TRLR"]
    assert len(errors) == 1
    assert isinstance(errors[0], GedcomSyntaxError)


def test_tokenize_text_raises_without_error_callback() -> None:
    with pytest.raises(GedcomSyntaxError):
        list(tokenize_text("0 HEAD\nbroken"))


def test_read_gedcom_text_reads_mock_file() -> None:
    text = read_gedcom_text(mock_file_path("family.ged"))
    tokens = list(tokenize_text(text))

    assert tokens[0].level == 0
    assert tokens[0].tag == "HEAD"
    assert tokens[-1].tag == "TRLR"


def test_read_gedcom_text_missing_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        read_gedcom_text(tmp_path / "missing.ged")
