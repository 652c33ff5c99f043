from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from gedcom_viewer.cli.utils import GEDCOM_OPTION_HELP, load_session, viewer_errors
from gedcom_viewer.services import generate_biography

console = Console()


def bio_command(
    person_id: str = typer.Argument(..., help="Person id, e.g. @I1@"),
    gedcom: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, readable=True, help=GEDCOM_OPTION_HELP
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help="Gemini model name (defaults to the configured one)",
    ),
):
    """
    Generate a short narrative biography with Gemini.
    """
    with viewer_errors():
        session = load_session(gedcom)
        person = session.person(person_id)

    with console.status("Gerando biografia..."):
        text = generate_biography(person, model=model)

    console.print(Panel(escape(text), title=escape(person.display_name)))
