from .exceptions import (
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

__all__ = [
    "DuplicateKeyError",
    "FDLConfigError",
    "FDLError",
    "FDLIOError",
    "FDLStructureError",
    "FDLSyntaxError",
    "KeyOutsideSectionError",
    "MalformedHeaderError",
    "MalformedLineError",
    "NestedSectionError",
    "UnclosedSectionError",
    "UnmatchedCloseError",
]
