# src/gedcom_viewer/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional, Union


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NAME", "FAMS".
        value: The line payload as a string (may be empty).
        raw: The original line content without surrounding whitespace.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    Strategy:
        - Split off the level.
        - Detect an optional pointer (starts with '@' and runs until the
          next space).
        - Remaining part is split into TAG and optional VALUE.

    Required order:
        <level> [<pointer>] <tag> [<value>]

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME João /Silva/"
        "1 FAMS @F1@"
    """
    raw = line.strip().lstrip("\ufeff")

    if not raw:
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    # --- 1. Extract level -------------------------------------------------
    parts = raw.split(" ", 1)
    if len(parts) == 1:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag (only level found) -> {raw!r}"
        )

    level_str, rest = parts[0], parts[1]
    if not level_str.isdigit():
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )

    level = int(level_str)
    rest = rest.lstrip(" ")

    if not rest:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag after level -> {raw!r}"
        )

    # --- 2. Extract optional pointer -------------------------------------
    pointer: Optional[str] = None

    if rest.startswith("@"):
        # e.g. "@I1@ INDI" -> pointer="@I1@", rest="INDI"
        try:
            space_index = rest.index(" ")
        except ValueError:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but no tag -> {raw!r}"
            ) from None

        pointer = rest[:space_index]
        rest = rest[space_index + 1 :].lstrip(" ")

        if not rest:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but missing tag -> {raw!r}"
            )

    # --- 3. Extract tag and optional value --------------------------------
    if " " in rest:
        tag, value = rest.split(" ", 1)
    else:
        tag, value = rest, ""

    return Token(
        lineno=lineno,
        level=level,
        pointer=pointer,
        tag=tag,
        value=value,
        raw=raw,
    )


def tokenize_text(
    text: str,
    *,
    on_error: Optional[Callable[[GedcomSyntaxError], None]] = None,
) -> Iterator[Token]:
    """
    Yield Token objects for every non-blank line of ``text``.

    Blank and whitespace-only lines are skipped. When ``on_error`` is given,
    malformed lines are reported to it and skipped; otherwise the
    GedcomSyntaxError propagates.
    """
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        if not raw_line.strip():
            continue

        try:
            token = tokenize_line(raw_line, lineno=lineno)
        except GedcomSyntaxError as exc:
            if on_error is None:
                raise
            on_error(exc)
            continue

        yield token


def read_gedcom_text(path: Union[str, Path]) -> str:
    """
    Read a GEDCOM file as text.

    Raises:
        FileNotFoundError: if `path` does not exist.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8-sig", errors="replace") as f:
        return f.read()
