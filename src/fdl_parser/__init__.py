"""
fdl_parser: parser for FDL, a small sectioned key/value text format used for
asset metadata.

    from fdl_parser import parse, parse_file, fetch

    doc = parse_file("sprites.fdl")
    fetch(doc, "walk", "end")   # -> "3"
"""

from fdl_parser.core.exceptions import (
    DuplicateKeyError,
    FDLConfigError,
    FDLError,
    FDLIOError,
    FDLStructureError,
    FDLSyntaxError,
    KeyOutsideSectionError,
    MalformedHeaderError,
    MalformedLineError,
    NestedSectionError,
    UnclosedSectionError,
    UnmatchedCloseError,
)
from fdl_parser.models import Document, Section
from fdl_parser.parser_core import FDLParser, fetch, parse, parse_file

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DuplicateKeyError",
    "FDLConfigError",
    "FDLError",
    "FDLIOError",
    "FDLParser",
    "FDLStructureError",
    "FDLSyntaxError",
    "KeyOutsideSectionError",
    "MalformedHeaderError",
    "MalformedLineError",
    "NestedSectionError",
    "Section",
    "UnclosedSectionError",
    "UnmatchedCloseError",
    "fetch",
    "parse",
    "parse_file",
]
