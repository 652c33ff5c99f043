from __future__ import annotations

import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Sequence

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from gedcom_viewer.core.exceptions import ViewerError
from gedcom_viewer.core.session import ViewerSession
from gedcom_viewer.registry.entities import Person, TreeNode
from gedcom_viewer.sample import SAMPLE_GEDCOM

console = Console()

GEDCOM_OPTION_HELP = "GEDCOM file to load (the bundled sample family when omitted)"


def load_session(path: Optional[Path], *, verbose: bool = False) -> ViewerSession:
    """
    Parse ``path`` (or the sample family) into a fresh viewer session.
    """
    t0 = time.perf_counter()

    session = ViewerSession()
    if path is None:
        session.load_text(SAMPLE_GEDCOM)
    else:
        session.load_file(path)

    elapsed = time.perf_counter() - t0

    if verbose:
        source = path if path is not None else "sample family"
        console.log(f"Loaded {source} in {elapsed:.2f}s")

    return session


@contextmanager
def viewer_errors() -> Iterator[None]:
    """Turn session errors into a red message and exit code 1."""
    try:
        yield
    except ViewerError as exc:
        console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        raise typer.Exit(code=1) from exc


def lifespan(person: Person) -> str:
    born = person.birth.year if person.birth and person.birth.year else "?"
    if person.death:
        died = person.death.year or "?"
    else:
        died = "Presente"
    return f"{born} - {died}"


def person_label(person: Person, *, highlight: bool = False) -> str:
    text = f"{escape(person.display_name)} [dim]({escape(person.id)}) {lifespan(person)}[/dim]"
    if highlight:
        text = f"[bold dark_orange]{text}[/bold dark_orange]"
    return text


def render_tree(
    node: TreeNode,
    *,
    title: Optional[str] = None,
    highlight: Sequence[str] = (),
) -> Tree:
    """Build a rich Tree for a projection; path members are highlighted."""
    marked = set(highlight)

    def _label(n: TreeNode) -> str:
        label = person_label(n.data, highlight=n.id in marked)
        if n.is_spouse:
            label = f"[magenta]⚭[/magenta] {label}"
        return label

    root_label = _label(node)
    tree = Tree(f"[bold]{escape(title)}[/bold]\n{root_label}" if title else root_label)

    def _add(branch: Tree, n: TreeNode) -> None:
        for child in n.children:
            _add(branch.add(_label(child)), child)

    _add(tree, node)
    return tree
