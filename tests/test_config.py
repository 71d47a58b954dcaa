# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from fdl_parser.config import (
    CONFIG_PATH,
    DuplicateKeyPolicy,
    FDLConfig,
    ParserOptions,
    get_config,
    load_config,
)
from fdl_parser.core.exceptions import FDLConfigError


def test_project_config_file_is_loaded() -> None:
    assert CONFIG_PATH.is_file()
    cfg = get_config()
    assert cfg.parser_options.duplicate_keys is DuplicateKeyPolicy.LAST_WINS
    assert cfg.parser_options.comment_prefixes == ()


def test_defaults_fill_missing_groups() -> None:
    cfg = FDLConfig({})
    assert cfg.debug is False
    assert cfg.logging["file"] is None
    assert cfg.paths["mock_files"] == "mock_files"
    assert cfg.parser_options == ParserOptions()


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "fdl.yml"
    path.write_text(
        "debug: true\n"
        "parser:\n"
        "  duplicate_keys: ERROR\n"
        "  comment_prefixes: ['#', ' ; ']\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.debug is True
    opts = cfg.parser_options
    assert opts.duplicate_keys is DuplicateKeyPolicy.ERROR
    assert opts.comment_prefixes == ("#", ";")
    # Untouched keys keep their defaults.
    assert opts.encoding == "utf-8"


def test_load_config_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).parser_options == ParserOptions()


def test_load_config_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(FDLConfigError):
        load_config(path)


def test_load_config_rejects_bad_policy(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("parser:\n  duplicate_keys: sometimes\n", encoding="utf-8")
    with pytest.raises(FDLConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "prefixes",
    [[""], ["  "], ["["], [3], ["x"], ["rem"], ["#", "_"], ["="], ["//1"]],
)
def test_parser_options_reject_bad_comment_prefixes(prefixes: list) -> None:
    with pytest.raises(FDLConfigError):
        ParserOptions.from_mapping({"comment_prefixes": prefixes})


def test_single_string_comment_prefix() -> None:
    opts = ParserOptions.from_mapping({"comment_prefixes": "#"})
    assert opts.comment_prefixes == ("#",)


@pytest.mark.parametrize("prefix", ["#", ";", "//", "--", "!"])
def test_punctuation_comment_prefixes_accepted(prefix: str) -> None:
    opts = ParserOptions.from_mapping({"comment_prefixes": [prefix]})
    assert opts.comment_prefixes == (prefix,)
