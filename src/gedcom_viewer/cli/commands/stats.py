from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom_viewer.cli.utils import GEDCOM_OPTION_HELP, load_session

console = Console()


def stats_command(
    gedcom: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, readable=True, help=GEDCOM_OPTION_HELP
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    session = load_session(gedcom, verbose=verbose)
    data = session.data

    with_parents = sum(1 for p in data.people.values() if p.famc)
    with_birth = sum(1 for p in data.people.values() if p.birth)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(len(data.people)))
    table.add_row("Families", str(len(data.families)))
    table.add_row("With parents", str(with_parents))
    table.add_row("With birth event", str(with_birth))

    console.print(table)
