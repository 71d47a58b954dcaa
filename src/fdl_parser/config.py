from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from fdl_parser.core.exceptions import FDLConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "fdl_parser.yml"

DEFAULTS: Dict[str, Any] = {
    "debug": False,
    "parser": {
        "duplicate_keys": "last_wins",
        "comment_prefixes": [],
        "encoding": "utf-8",
    },
    "logging": {
        "level": "INFO",
        "dir": "logs",
        "file": None,
        "rotate": False,
        "module_files": False,
    },
    "paths": {
        "mock_files": "mock_files",
    },
}


class DuplicateKeyPolicy(str, Enum):
    """What the builder does when a key repeats inside one section."""

    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"
    ERROR = "error"


@dataclass(frozen=True)
class ParserOptions:
    """
    Validated, immutable view of the ``parser`` config group.

    The classifier reads ``comment_prefixes``; the builder reads
    ``duplicate_keys``; the file loader reads ``encoding``.
    """

    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS
    comment_prefixes: Tuple[str, ...] = ()
    encoding: str = "utf-8"

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "ParserOptions":
        raw_policy = str(data.get("duplicate_keys", DuplicateKeyPolicy.LAST_WINS.value))
        try:
            policy = DuplicateKeyPolicy(raw_policy.lower())
        except ValueError:
            allowed = ", ".join(p.value for p in DuplicateKeyPolicy)
            raise FDLConfigError(
                f"parser.duplicate_keys must be one of {allowed}, got {raw_policy!r}"
            ) from None

        prefixes = data.get("comment_prefixes") or []
        if isinstance(prefixes, str):
            prefixes = [prefixes]
        if any(not isinstance(p, str) or not p.strip() for p in prefixes):
            raise FDLConfigError(
                f"parser.comment_prefixes must be non-empty strings, got {prefixes!r}"
            )
        # Letters, digits, '_', '=' and '[' would swallow headers or ordinary keys.
        for p in prefixes:
            if any(ch.isalnum() or ch in "_=[" for ch in p.strip()):
                raise FDLConfigError(
                    f"parser.comment_prefixes may only use punctuation other than "
                    f"'_', '=' and '[', got {p!r}"
                )

        return cls(
            duplicate_keys=policy,
            comment_prefixes=tuple(p.strip() for p in prefixes),
            encoding=str(data.get("encoding") or "utf-8"),
        )


class FDLConfig:
    def __init__(self, data: Dict[str, Any]):
        self.parser = {**DEFAULTS["parser"], **(data.get("parser") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.debug = bool(data.get("debug", DEFAULTS["debug"]))

    @property
    def parser_options(self) -> ParserOptions:
        return ParserOptions.from_mapping(self.parser)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<FDLConfig debug={self.debug} parser={self.parser!r}>"


def load_config(path: Optional[Union[str, Path]] = None) -> FDLConfig:
    """
    Read a YAML config file into an FDLConfig.

    When ``path`` is omitted the project-level ``config/fdl_parser.yml`` is
    used; if that file does not exist the built-in defaults apply. An
    explicitly requested file must exist.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return FDLConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise FDLConfigError(f"Config root must be a mapping: {config_path}")

    cfg = FDLConfig(data)
    # Fail early on a bad parser group rather than on first parse.
    cfg.parser_options
    return cfg


_config_cache: Optional[FDLConfig] = None


def get_config() -> FDLConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
