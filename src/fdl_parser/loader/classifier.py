# src/fdl_parser/loader/classifier.py

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from fdl_parser.config import ParserOptions
from fdl_parser.core.exceptions import MalformedHeaderError, MalformedLineError

SECTION_CLOSE_MARKER = "/"

# Only CR, LF and CRLF end a line; other Unicode separators belong to values.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LineKind(str, Enum):
    SECTION_OPEN = "section_open"
    SECTION_CLOSE = "section_close"
    KEY_VALUE = "key_value"
    BLANK = "blank"
    COMMENT = "comment"


@dataclass(frozen=True)
class Line:
    """
    A single classified FDL line.

    Attributes:
        lineno: 1-based line number in the original text.
        kind: What the line is (header, close marker, key/value, ...).
        name: Section name for SECTION_OPEN lines, else None.
        key: Trimmed key for KEY_VALUE lines, else None.
        value: Trimmed value for KEY_VALUE lines, else None.
        raw: The original line content without line-ending characters.
    """
    lineno: int
    kind: LineKind
    name: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None
    raw: str = ""

    @property
    def is_structural(self) -> bool:
        """True for lines the builder has to act on."""
        return self.kind not in (LineKind.BLANK, LineKind.COMMENT)


def _classify_header(text: str, raw: str, lineno: int) -> Line:
    if not text.endswith("]"):
        raise MalformedHeaderError(lineno, raw, "section header missing closing ']'")

    inner = text[1:-1]
    if inner == SECTION_CLOSE_MARKER:
        return Line(lineno=lineno, kind=LineKind.SECTION_CLOSE, raw=raw)

    name = inner.strip()
    if not name:
        raise MalformedHeaderError(lineno, raw, "section header has an empty name")
    if name == SECTION_CLOSE_MARKER:
        raise MalformedHeaderError(lineno, raw, "close marker must be exactly '[/]'")
    if "[" in name or "]" in name:
        raise MalformedHeaderError(lineno, raw, "section name may not contain brackets")

    return Line(lineno=lineno, kind=LineKind.SECTION_OPEN, name=name, raw=raw)


def classify_line(
    raw: str,
    lineno: int = 0,
    options: Optional[ParserOptions] = None,
) -> Line:
    """
    Classify a single FDL line.

    The whole line is trimmed first, then matched against, in order:

        ""            -> BLANK
        <comment>...  -> COMMENT (only when comment prefixes are configured)
        [/]           -> SECTION_CLOSE
        [name]        -> SECTION_OPEN
        key=value     -> KEY_VALUE, split on the first '='

    Raises:
        MalformedHeaderError: a '[' line that is not a valid header or close marker.
        MalformedLineError: anything else that is not a key/value pair.
    """
    opts = options or ParserOptions()
    raw = raw.rstrip("\r\n")

    if lineno == 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    text = raw.strip()
    if not text:
        return Line(lineno=lineno, kind=LineKind.BLANK, raw=raw)

    if opts.comment_prefixes and text.startswith(opts.comment_prefixes):
        return Line(lineno=lineno, kind=LineKind.COMMENT, raw=raw)

    if text.startswith("["):
        return _classify_header(text, raw, lineno)

    key, sep, value = text.partition("=")
    if not sep:
        raise MalformedLineError(lineno, raw)

    key = key.strip()
    if not key:
        raise MalformedLineError(lineno, raw, "key/value line has an empty key")

    return Line(
        lineno=lineno,
        kind=LineKind.KEY_VALUE,
        key=key,
        value=value.strip(),
        raw=raw,
    )


def classify_text(text: str, options: Optional[ParserOptions] = None) -> Iterator[Line]:
    """
    Lazily yield a classified Line for every line of ``text``.

    Blank lines are yielded too (as BLANK) so line numbers stay aligned
    with the input; the builder skips them. Accepts \\n, \\r\\n and \\r
    line endings; nothing else splits a line.

    Raises:
        MalformedHeaderError / MalformedLineError on the first bad line.
    """
    opts = options or ParserOptions()
    raw_lines = _LINE_BREAK.split(text)
    if raw_lines[-1] == "":
        # Text ending in a line break (or empty text) has no final line.
        raw_lines.pop()

    for lineno, raw_line in enumerate(raw_lines, start=1):
        yield classify_line(raw_line, lineno=lineno, options=opts)


class ClassifiedText:
    """
    Restartable view over the classified lines of one text.

    Each iteration re-runs the classifier from line 1, so the same
    object can be handed to several consumers.
    """

    def __init__(self, text: str, options: Optional[ParserOptions] = None):
        self.text = text
        self.options = options or ParserOptions()

    def __iter__(self) -> Iterator[Line]:
        return classify_text(self.text, self.options)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<ClassifiedText chars={len(self.text)}>"
