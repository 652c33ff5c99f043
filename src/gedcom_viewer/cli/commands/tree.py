from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_viewer.cli.utils import GEDCOM_OPTION_HELP, load_session, render_tree, viewer_errors
from gedcom_viewer.exporter import tree_to_dict

console = Console()


class Direction(str, Enum):
    ancestors = "ancestors"
    descendants = "descendants"
    both = "both"


def tree_command(
    gedcom: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, readable=True, help=GEDCOM_OPTION_HELP
    ),
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        help="Person id at the centre of the diagram",
    ),
    generations: Optional[int] = typer.Option(
        None,
        "--generations",
        "-g",
        help="Number of generations to show",
    ),
    direction: Direction = typer.Option(
        Direction.both,
        "--direction",
        "-d",
        help="Which half of the hourglass to draw",
    ),
    trace: Optional[str] = typer.Option(
        None,
        "--trace",
        help="Highlight the path from the root to this person",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the projection as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Draw the ancestor/descendant tree around a person.
    """
    with viewer_errors():
        session = load_session(gedcom, verbose=verbose)
        if root:
            session.set_root(root)
        if trace:
            if not session.trace_path(trace, start_id=session.root_id):
                console.print("[yellow]Não foi possível encontrar uma conexão entre estas pessoas.[/yellow]")
        if generations is not None:
            session.generations = generations

        halves = []
        if direction in (Direction.ancestors, Direction.both):
            halves.append(("Ancestrais", session.ancestor_tree()))
        if direction in (Direction.descendants, Direction.both):
            halves.append(("Descendentes", session.descendant_tree()))

    if as_json:
        payload = {
            title: tree_to_dict(node) if node is not None else None
            for title, node in halves
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for title, node in halves:
        if node is None:
            console.print(f"[dim]{title}: nenhum[/dim]")
            continue
        console.print(render_tree(node, title=title, highlight=session.highlighted_path))
