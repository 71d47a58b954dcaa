"""
Immutable data model produced by the FDL parser.

A Document maps section names to Sections; a Section maps keys to string
values. Both are frozen and expose read-only mapping views, so a built
Document can be shared freely between readers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, ItemsView, Iterator, KeysView, List, Mapping, Optional


@dataclass(frozen=True)
class Section:
    """
    One ``[name] ... [/]`` block.

    Attributes:
        name: Non-empty section name.
        fields: Read-only mapping of key -> value, in first-insertion order.
        lineno: Line of the opening header (0 when built by hand).
    """

    name: str
    fields: Mapping[str, str] = field(default_factory=dict)
    lineno: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Section name must be non-empty")
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def get(self, key: str) -> Optional[str]:
        return self.fields.get(key)

    def keys(self) -> KeysView[str]:
        return self.fields.keys()

    def items(self) -> ItemsView[str, str]:
        return self.fields.items()

    def to_dict(self) -> Dict[str, str]:
        return dict(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<Section [{self.name}] keys={len(self.fields)}>"


@dataclass(frozen=True)
class Document:
    """
    The complete parse result of one FDL text.

    Sections keep the order in which they first appeared. Lookups never
    raise: a missing section or key yields None.
    """

    sections: Mapping[str, Section] = field(default_factory=dict)
    source: Optional[Path] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections", MappingProxyType(dict(self.sections)))

    # ------------------------------------------------------------------ #
    # Public query API
    # ------------------------------------------------------------------ #

    def fetch(self, section: str, key: str) -> Optional[str]:
        """
        Return the value stored under ``key`` in ``section``, or None.
        """
        found = self.sections.get(section)
        if found is None:
            return None
        return found.get(key)

    def section(self, name: str) -> Optional[Section]:
        return self.sections.get(name)

    def section_names(self) -> List[str]:
        return list(self.sections)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Plain nested dicts, e.g. for JSON export."""
        return {name: sec.to_dict() for name, sec in self.sections.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.sections

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections.values())

    def __len__(self) -> int:
        return len(self.sections)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        src = f" source={self.source}" if self.source else ""
        return f"<Document sections={len(self.sections)}{src}>"
