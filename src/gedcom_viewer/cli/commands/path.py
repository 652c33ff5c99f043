from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom_viewer.cli.utils import GEDCOM_OPTION_HELP, load_session, person_label, viewer_errors
from gedcom_viewer.relationships import get_path_peak, get_relationship_label
from gedcom_viewer.traversal import find_shortest_path

console = Console()


def path_command(
    start: str = typer.Argument(..., help="Person id to start from"),
    target: str = typer.Argument(..., help="Person id to reach"),
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
    Show the shortest chain of relatives between two people.
    """
    with viewer_errors():
        session = load_session(gedcom, verbose=verbose)
        session.person(start)
        session.person(target)
        data = session.data

    path = find_shortest_path(data, start, target)
    if not path:
        console.print("[yellow]Não foi possível encontrar uma conexão entre estas pessoas.[/yellow]")
        raise typer.Exit(code=1)

    peak = get_path_peak(data, path)

    table = Table(title=f"Caminho {start} → {target}")
    table.add_column("#", justify="right")
    table.add_column("Pessoa")
    table.add_column(f"Parentesco com {start}")

    for i, person_id in enumerate(path):
        person = data.people[person_id]
        table.add_row(
            str(i),
            person_label(person, highlight=person_id == peak),
            get_relationship_label(data, start, person_id),
        )

    console.print(table)
    console.print(f"Pico do caminho: {person_label(data.people[peak])}")
    console.print(f"Parentesco: [bold]{get_relationship_label(data, start, target)}[/bold]")


def relation_command(
    base: str = typer.Argument(..., help="Person id the label is relative to"),
    target: str = typer.Argument(..., help="Person id to describe"),
    gedcom: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, readable=True, help=GEDCOM_OPTION_HELP
    ),
):
    """
    Print the kinship term of TARGET as seen from BASE.
    """
    with viewer_errors():
        session = load_session(gedcom)
        session.person(base)
        session.person(target)

    console.print(get_relationship_label(session.data, base, target))
