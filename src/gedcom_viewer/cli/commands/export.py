from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_viewer.cli.utils import GEDCOM_OPTION_HELP, load_session
from gedcom_viewer.exporter import export_graph_json, serialize_graph_to_json_string

console = Console()


def export_command(
    gedcom: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, readable=True, help=GEDCOM_OPTION_HELP
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export the parsed family graph to JSON (stdout by default).
    """
    session = load_session(gedcom, verbose=verbose)
    indent = 2 if pretty else None

    if out:
        export_graph_json(session.data, out, indent=indent)
        if verbose:
            console.log(f"Export complete: {out}")
    else:
        print(serialize_graph_to_json_string(session.data, indent=indent))
