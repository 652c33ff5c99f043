"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from gedcom_viewer.config import get_config
from gedcom_viewer.loader.tokenizer import GedcomSyntaxError, read_gedcom_text, tokenize_text
from gedcom_viewer.logging import get_logger
from gedcom_viewer.registry.build_registry import ParseStats, build_registry
from gedcom_viewer.registry.entities import GedcomData


class GEDCOMParser:
    """
    High-level parser:
      - reads file or text
      - tokenizes, dropping malformed lines
      - folds tokens into the family graph
      - resolves family pointers
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

        self.stats = ParseStats()
        self.data: Optional[GedcomData] = None

    def _drop_line(self, exc: GedcomSyntaxError) -> None:
        self.stats.dropped += 1
        self.log.debug(f"Dropped malformed line: {exc}")

    # ---------------------------------------------------------
    # Parse
    # ---------------------------------------------------------
    def parse_text(self, text: str) -> GedcomData:
        """Parse GEDCOM text. Never raises for content problems."""
        self.stats = ParseStats()
        tokens = tokenize_text(text, on_error=self._drop_line)
        self.data = build_registry(tokens, stats=self.stats)

        self.log.info(
            "Parsed GEDCOM: people=%d families=%d lines=%d ignored=%d dropped=%d",
            len(self.data.people),
            len(self.data.families),
            self.stats.lines,
            self.stats.ignored,
            self.stats.dropped,
        )
        if self.cfg.debug and self.stats.ignored_tags:
            self.log.debug(f"Ignored tags: {self.stats.ignored_tags}")

        return self.data

    def parse_file(self, path: Union[str, Path]) -> GedcomData:
        """Read and parse a GEDCOM file; a missing file raises FileNotFoundError."""
        self.log.info(f"Loading GEDCOM input: {path}")
        try:
            text = read_gedcom_text(path)
        except OSError:
            self.log.exception("Reading GEDCOM input failed.")
            raise
        return self.parse_text(text)


def parse_gedcom(text: str) -> GedcomData:
    """Convenience wrapper: parse GEDCOM text into a GedcomData graph."""
    return GEDCOMParser().parse_text(text)


def parse_gedcom_file(path: Union[str, Path]) -> GedcomData:
    return GEDCOMParser().parse_file(path)
