# src/fdl_parser/loader/__init__.py

"""
Public interface for the FDL loader stack.

Intended usage from other parts of the project and tests:

    from fdl_parser.loader import (
        Line,
        LineKind,
        ClassifiedText,
        classify_line,
        classify_text,
        build_document,
        load_text,
    )
"""

from __future__ import annotations

from .builder import InSection, NoSection, build_document, step
from .classifier import ClassifiedText, Line, LineKind, classify_line, classify_text
from .file_loader import load_text

__all__ = [
    "ClassifiedText",
    "InSection",
    "Line",
    "LineKind",
    "NoSection",
    "build_document",
    "classify_line",
    "classify_text",
    "load_text",
    "step",
]
