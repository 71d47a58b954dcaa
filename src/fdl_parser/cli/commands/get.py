from __future__ import annotations

from pathlib import Path

import typer

from fdl_parser.cli.utils import EXIT_NOT_FOUND, err_console, load_document
from fdl_parser.parser_core import fetch


def get_command(
    fdl_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    section: str = typer.Argument(..., help="Section name"),
    key: str = typer.Argument(..., help="Key inside the section"),
):
    """
    Print a single value; exit code 1 when the section or key is missing.
    """
    document = load_document(fdl_file)
    value = fetch(document, section, key)

    if value is None:
        err_console.print(f"{section}.{key}: not found", markup=False)
        raise typer.Exit(code=EXIT_NOT_FOUND)

    typer.echo(value)
