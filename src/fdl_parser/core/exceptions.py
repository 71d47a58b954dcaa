from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class FDLError(Exception):
    """Base exception for all FDL parsing failures."""


class FDLConfigError(FDLError):
    """Raised when the configuration holds an unusable value."""


class FDLIOError(FDLError):
    """Raised when the input file cannot be read or decoded."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"Could not read FDL file {self.path}: {reason}")


# ---------------------------------------------------------
# Line-level syntax errors
# ---------------------------------------------------------
class FDLSyntaxError(FDLError, ValueError):
    """Raised when a single line cannot be classified."""

    def __init__(self, lineno: int, raw: str, message: str):
        self.lineno = lineno
        self.raw = raw
        super().__init__(f"Line {lineno}: {message} -> {raw!r}")


class MalformedHeaderError(FDLSyntaxError):
    """A bracketed line that is neither ``[name]`` nor ``[/]``."""

    def __init__(self, lineno: int, raw: str, detail: str = "malformed section header"):
        super().__init__(lineno, raw, detail)


class MalformedLineError(FDLSyntaxError):
    """A non-blank line matching no grammar production."""

    def __init__(self, lineno: int, raw: str, detail: str = "expected 'key=value'"):
        super().__init__(lineno, raw, detail)


# ---------------------------------------------------------
# Structural errors raised by the document builder
# ---------------------------------------------------------
class FDLStructureError(FDLError):
    """Raised when section structure rules are violated."""


class NestedSectionError(FDLStructureError):
    def __init__(self, lineno: int, section: str, open_section: str):
        self.lineno = lineno
        self.section = section
        self.open_section = open_section
        super().__init__(
            f"Line {lineno}: section [{section}] opened while "
            f"[{open_section}] is still open"
        )


class UnmatchedCloseError(FDLStructureError):
    def __init__(self, lineno: int):
        self.lineno = lineno
        super().__init__(f"Line {lineno}: [/] without an open section")


class KeyOutsideSectionError(FDLStructureError):
    def __init__(self, lineno: int, key: str):
        self.lineno = lineno
        self.key = key
        super().__init__(f"Line {lineno}: key {key!r} outside of any section")


class UnclosedSectionError(FDLStructureError):
    def __init__(self, section: str, lineno: Optional[int] = None):
        self.section = section
        self.lineno = lineno
        where = f" (opened on line {lineno})" if lineno else ""
        super().__init__(f"Section [{section}]{where} is never closed")


class DuplicateKeyError(FDLStructureError):
    def __init__(self, section: str, key: str, lineno: int):
        self.section = section
        self.key = key
        self.lineno = lineno
        super().__init__(
            f"Line {lineno}: duplicate key {key!r} in section [{section}]"
        )
