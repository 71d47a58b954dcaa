from __future__ import annotations

from pathlib import Path
from typing import Union

from fdl_parser.core.exceptions import FDLIOError
from fdl_parser.logging import get_logger

log = get_logger(__name__)


def load_text(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a whole FDL file into memory.

    Raises:
        FDLIOError: the file is missing, unreadable or not valid ``encoding``.
            The original exception is chained as ``__cause__``.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FDLIOError(file_path, "file not found")

    try:
        text = file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise FDLIOError(file_path, f"not valid {encoding}: {exc.reason}") from exc
    except OSError as exc:
        raise FDLIOError(file_path, exc.strerror or str(exc)) from exc

    log.debug("Loaded file: %s (%d chars)", file_path, len(text))
    return text
