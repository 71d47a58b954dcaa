from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from fdl_parser.cli.utils import err_console, load_document, write_json


def export_command(
    fdl_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report parse timing",
    ),
):
    """
    Export an FDL file to JSON (stdout by default).
    """
    document = load_document(fdl_file, verbose=verbose)

    write_json(document.to_dict(), out=out, pretty=pretty)

    if verbose and out:
        err_console.log(f"Wrote {out}")
