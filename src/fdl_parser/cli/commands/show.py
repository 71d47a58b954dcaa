from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table
from rich.text import Text

from fdl_parser.cli.utils import EXIT_NOT_FOUND, console, err_console, load_document


def show_command(
    fdl_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    section: Optional[str] = typer.Option(
        None,
        "--section",
        "-s",
        help="Only show this section",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report parse timing",
    ),
):
    """
    Print every section of an FDL file as a table.
    """
    document = load_document(fdl_file, verbose=verbose)

    sections = list(document)
    if section is not None:
        sections = [s for s in sections if s.name == section]
        if not sections:
            err_console.print(f"No section [{section}] in {fdl_file}", markup=False)
            raise typer.Exit(code=EXIT_NOT_FOUND)

    for sec in sections:
        table = Table(title=Text(f"[{sec.name}]"), title_justify="left")
        table.add_column("Key", style="bold")
        table.add_column("Value")
        for key, value in sec.items():
            table.add_row(Text(key), Text(value))
        console.print(table)
