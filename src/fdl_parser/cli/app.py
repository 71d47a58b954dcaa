from __future__ import annotations

import typer

from fdl_parser.cli.commands.export import export_command
from fdl_parser.cli.commands.get import get_command
from fdl_parser.cli.commands.show import show_command

app = typer.Typer(
    name="fdl",
    help="Inspect and query FDL asset metadata files",
    add_completion=False,
)

app.command("show")(show_command)
app.command("get")(get_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
