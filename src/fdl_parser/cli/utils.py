from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape

from fdl_parser.core.exceptions import FDLError
from fdl_parser.models import Document
from fdl_parser.parser_core import FDLParser

console = Console()
err_console = Console(stderr=True)

EXIT_NOT_FOUND = 1
EXIT_PARSE_ERROR = 2


def load_document(path: Path, *, verbose: bool = False) -> Document:
    """
    Parse ``path``; report failures on stderr and exit with EXIT_PARSE_ERROR.
    """
    t0 = time.perf_counter()

    try:
        document = FDLParser().parse_file(path)
    except FDLError as exc:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=EXIT_PARSE_ERROR) from exc

    elapsed = time.perf_counter() - t0
    if verbose:
        err_console.log(f"Parsed {path} in {elapsed * 1000:.1f}ms")

    return document


def write_json(
    data: Dict[str, Any],
    *,
    out: Optional[Path],
    pretty: bool,
) -> None:
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        typer.echo(payload)
