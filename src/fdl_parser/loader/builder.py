# src/fdl_parser/loader/builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Union, cast

from fdl_parser.config import DuplicateKeyPolicy, ParserOptions
from fdl_parser.core.exceptions import (
    DuplicateKeyError,
    KeyOutsideSectionError,
    NestedSectionError,
    UnclosedSectionError,
    UnmatchedCloseError,
)
from fdl_parser.logging import get_logger
from fdl_parser.models import Document, Section

from .classifier import Line, LineKind

log = get_logger(__name__)


# ---------- BUILDER STATE ----------

@dataclass(frozen=True)
class NoSection:
    """Between sections: only a header (or blank line) is acceptable."""


@dataclass
class InSection:
    """
    Inside ``[name]``: key/value lines accumulate until ``[/]``.

    Attributes:
        name: Name of the open section.
        lineno: Line of its header.
        fields: Keys collected so far (pre-seeded when a name is reopened).
    """

    name: str
    lineno: int
    fields: Dict[str, str] = field(default_factory=dict)


BuilderState = Union[NoSection, InSection]


def _add_field(
    state: InSection,
    line: Line,
    policy: DuplicateKeyPolicy,
) -> None:
    key, value = cast(str, line.key), cast(str, line.value)

    if key not in state.fields:
        state.fields[key] = value
        return

    if policy is DuplicateKeyPolicy.ERROR:
        raise DuplicateKeyError(state.name, key, line.lineno)

    previous = state.fields[key]
    if policy is DuplicateKeyPolicy.FIRST_WINS:
        log.warning(
            "Line %d: duplicate key %r in [%s]; keeping first value %r",
            line.lineno, key, state.name, previous,
        )
        return

    log.warning(
        "Line %d: duplicate key %r in [%s]; %r replaces %r",
        line.lineno, key, state.name, value, previous,
    )
    state.fields[key] = value


def step(
    state: BuilderState,
    line: Line,
    sections: Dict[str, Section],
    policy: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS,
) -> BuilderState:
    """
    Apply one classified line to the builder state and return the next state.

    Closed sections are committed into ``sections``.
    """
    if not line.is_structural:
        return state

    if line.kind is LineKind.SECTION_OPEN:
        name = cast(str, line.name)
        if isinstance(state, InSection):
            raise NestedSectionError(line.lineno, name, state.name)

        existing = sections.get(name)
        if existing is not None:
            log.debug(
                "Line %d: reopening section [%s] (first opened on line %d)",
                line.lineno, name, existing.lineno,
            )
            return InSection(name, existing.lineno, dict(existing.fields))
        return InSection(name, line.lineno)

    if line.kind is LineKind.SECTION_CLOSE:
        if isinstance(state, NoSection):
            raise UnmatchedCloseError(line.lineno)
        sections[state.name] = Section(state.name, state.fields, lineno=state.lineno)
        return NoSection()

    # KEY_VALUE
    if isinstance(state, NoSection):
        raise KeyOutsideSectionError(line.lineno, line.key or "")
    _add_field(state, line, policy)
    return state


def build_document(
    lines: Iterable[Line],
    options: Optional[ParserOptions] = None,
    source: Optional[Path] = None,
) -> Document:
    """
    Build a Document from a stream of classified lines.

    This is the main entry point of the loader pipeline:

        text -> classify_text() -> build_document() -> Document

    Processing stops at the first structural violation.

    Raises:
        NestedSectionError, UnmatchedCloseError, KeyOutsideSectionError,
        DuplicateKeyError (policy ``error`` only), UnclosedSectionError.
    """
    opts = options or ParserOptions()
    sections: Dict[str, Section] = {}
    state: BuilderState = NoSection()

    for line in lines:
        state = step(state, line, sections, opts.duplicate_keys)

    if isinstance(state, InSection):
        raise UnclosedSectionError(state.name, state.lineno)

    log.debug("Built document with %d section(s)", len(sections))
    return Document(sections=sections, source=source)
