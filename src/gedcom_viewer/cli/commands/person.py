from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gedcom_viewer.cli.utils import GEDCOM_OPTION_HELP, lifespan, load_session, person_label, viewer_errors
from gedcom_viewer.registry.entities import Event, Person
from gedcom_viewer.registry.queries import get_children, get_parents, get_spouses, search_people
from gedcom_viewer.traversal import get_siblings

console = Console()


def _event_text(event: Optional[Event]) -> str:
    if event is None:
        return "-"
    date = event.date or "?"
    return f"{date}, {event.place}" if event.place else date


def _relatives_section(title: str, people: List[Person]) -> None:
    console.print(f"[bold]{title}[/bold]")
    if not people:
        console.print("  [dim]-[/dim]")
        return
    for p in people:
        console.print(f"  {person_label(p)}")


def person_command(
    person_id: str = typer.Argument(..., help="Person id, e.g. @I1@"),
    gedcom: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, readable=True, help=GEDCOM_OPTION_HELP
    ),
):
    """
    Show a person's details and immediate relatives.
    """
    with viewer_errors():
        session = load_session(gedcom)
        person = session.select(person_id)
        data = session.data

    console.print(f"[bold]{escape(person.display_name)}[/bold] ({escape(person.id)})  {lifespan(person)}")
    console.print(f"Sexo: {person.sex.value}")
    console.print(f"Nascimento: {escape(_event_text(person.birth))}")
    console.print(f"Falecimento: {escape(_event_text(person.death))}")
    if person.image_url:
        console.print(f"Imagem: {escape(person.image_url)}")
    if person.notes:
        console.print(f"Notas: {escape(person.notes)}")

    _relatives_section("Pais", get_parents(data, person_id))
    _relatives_section("Cônjuge(s)", get_spouses(data, person_id))
    _relatives_section("Filhos", get_children(data, person_id))
    _relatives_section("Irmãos", get_siblings(data, person_id))


def search_command(
    query: str = typer.Argument(..., help="Name or id fragment"),
    gedcom: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, readable=True, help=GEDCOM_OPTION_HELP
    ),
):
    """
    Find people whose name or id contains QUERY.
    """
    session = load_session(gedcom)
    matches = search_people(session.data, query)

    if not matches:
        console.print("[yellow]Nenhuma pessoa encontrada.[/yellow]")
        return

    table = Table(title=f"Resultados para '{escape(query)}'")
    table.add_column("Id")
    table.add_column("Nome")
    table.add_column("Vida")
    for p in matches:
        table.add_row(escape(p.id), escape(p.display_name), lifespan(p))
    console.print(table)
