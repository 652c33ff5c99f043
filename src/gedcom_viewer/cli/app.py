from __future__ import annotations

import typer

from gedcom_viewer.cli.commands.bio import bio_command
from gedcom_viewer.cli.commands.export import export_command
from gedcom_viewer.cli.commands.path import path_command, relation_command
from gedcom_viewer.cli.commands.person import person_command, search_command
from gedcom_viewer.cli.commands.stats import stats_command
from gedcom_viewer.cli.commands.tree import tree_command

app = typer.Typer(
    name="gedcom-viewer",
    help="GEDCOM family tree viewer: trees, relationship paths and biographies",
    add_completion=False,
)

app.command("tree")(tree_command)
app.command("path")(path_command)
app.command("relation")(relation_command)
app.command("person")(person_command)
app.command("search")(search_command)
app.command("bio")(bio_command)
app.command("stats")(stats_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
