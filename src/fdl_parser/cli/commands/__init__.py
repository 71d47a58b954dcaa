"""
CLI command modules for fdl_parser.

Each command module defines a single Typer-compatible command function.
"""

from fdl_parser.cli.commands.export import export_command
from fdl_parser.cli.commands.get import get_command
from fdl_parser.cli.commands.show import show_command

__all__ = [
    "export_command",
    "get_command",
    "show_command",
]
