# src/fdl_parser/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

from fdl_parser.config import get_config

# This file lives at <project_root>/src/fdl_parser/utils/pathing.py
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is the directory that holds src/, tests/, config/
    and mock_files/.
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("mock_files/sprites.fdl")
        resolve_project_path(Path("config") / "fdl_parser.yml")
    """
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """
    Return the absolute path to a sample file under the configured
    mock files directory (``paths.mock_files``, default ``mock_files/``).
    """
    mock_dir = get_config().paths.get("mock_files") or "mock_files"
    return resolve_project_path(Path(mock_dir) / filename)
