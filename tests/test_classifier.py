# tests/test_classifier.py

from __future__ import annotations

import pytest

from fdl_parser.config import ParserOptions
from fdl_parser.core.exceptions import MalformedHeaderError, MalformedLineError
from fdl_parser.loader import ClassifiedText, LineKind, classify_line, classify_text


def test_classify_line_section_open() -> None:
    line = classify_line("[walk]", lineno=3)
    assert line.lineno == 3
    assert line.kind is LineKind.SECTION_OPEN
    assert line.name == "walk"
    assert line.key is None


def test_classify_line_section_close() -> None:
    line = classify_line("[/]", lineno=7)
    assert line.kind is LineKind.SECTION_CLOSE
    assert line.name is None


def test_classify_line_trims_header_name() -> None:
    line = classify_line("   [ walk cycle ]  ", lineno=1)
    assert line.kind is LineKind.SECTION_OPEN
    assert line.name == "walk cycle"


def test_classify_line_key_value_trimmed() -> None:
    line = classify_line("  speed =  0.125  ", lineno=2)
    assert line.kind is LineKind.KEY_VALUE
    assert line.key == "speed"
    assert line.value == "0.125"
    assert line.raw == "  speed =  0.125  "


def test_classify_line_splits_on_first_equals_only() -> None:
    line = classify_line("path=a=b", lineno=1)
    assert line.key == "path"
    assert line.value == "a=b"


def test_classify_line_empty_value_allowed() -> None:
    line = classify_line("label=", lineno=1)
    assert line.kind is LineKind.KEY_VALUE
    assert line.key == "label"
    assert line.value == ""


@pytest.mark.parametrize("raw", ["", "   ", "\t", "\r\n"])
def test_classify_line_blank(raw: str) -> None:
    line = classify_line(raw, lineno=4)
    assert line.kind is LineKind.BLANK
    assert not line.is_structural


def test_classify_line_strips_bom_on_first_line() -> None:
    line = classify_line("\ufeff[flap]", lineno=1)
    assert line.kind is LineKind.SECTION_OPEN
    assert line.name == "flap"


@pytest.mark.parametrize(
    "raw",
    ["[walk", "[]", "[   ]", "[a]b]", "[a] trailing", "[[a]]"],
)
def test_classify_line_malformed_header(raw: str) -> None:
    with pytest.raises(MalformedHeaderError) as excinfo:
        classify_line(raw, lineno=5)
    assert excinfo.value.lineno == 5
    assert excinfo.value.raw == raw


@pytest.mark.parametrize("raw", ["frames", "just some words", "=1", "  = value"])
def test_classify_line_malformed_line(raw: str) -> None:
    with pytest.raises(MalformedLineError) as excinfo:
        classify_line(raw, lineno=9)
    assert excinfo.value.lineno == 9


def test_malformed_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        classify_line("nonsense", lineno=1)


def test_comments_are_malformed_without_configured_prefix() -> None:
    with pytest.raises(MalformedLineError):
        classify_line("# frames", lineno=1)


def test_comment_prefix_from_options() -> None:
    opts = ParserOptions(comment_prefixes=("#", ";"))
    assert classify_line("# a note", lineno=1, options=opts).kind is LineKind.COMMENT
    assert classify_line("  ; other", lineno=2, options=opts).kind is LineKind.COMMENT
    # A value containing '#' is still a value.
    line = classify_line("color=#ff0000", lineno=3, options=opts)
    assert line.kind is LineKind.KEY_VALUE
    assert line.value == "#ff0000"


def test_classify_text_numbers_lines_including_blanks() -> None:
    text = "[flap]\n\nframes=1\n[/]\n"
    lines = list(classify_text(text))
    assert [ln.lineno for ln in lines] == [1, 2, 3, 4]
    assert [ln.kind for ln in lines] == [
        LineKind.SECTION_OPEN,
        LineKind.BLANK,
        LineKind.KEY_VALUE,
        LineKind.SECTION_CLOSE,
    ]


def test_classify_text_handles_crlf() -> None:
    lines = list(classify_text("[idle]\r\nbegin=0\r\n[/]\r\n"))
    assert lines[1].key == "begin"
    assert lines[1].value == "0"
    assert lines[1].raw == "begin=0"


def test_classify_text_is_lazy() -> None:
    gen = classify_text("[ok]\nbroken line\n")
    first = next(gen)
    assert first.kind is LineKind.SECTION_OPEN
    with pytest.raises(MalformedLineError) as excinfo:
        next(gen)
    assert excinfo.value.lineno == 2


def test_classified_text_is_restartable() -> None:
    view = ClassifiedText("[a]\nx=1\n[/]\n")
    assert list(view) == list(view)
    assert len(list(view)) == 3


@pytest.mark.parametrize("sep", ["\x85", "\u2028", "\u2029", "\x0b", "\x0c", "\x1c", "\x1e"])
def test_classify_text_keeps_unicode_separators_in_values(sep: str) -> None:
    lines = list(classify_text(f"[a]\nname=foo{sep}bar\n[/]\n"))
    assert len(lines) == 3
    assert lines[1].key == "name"
    assert lines[1].value == f"foo{sep}bar"


def test_classify_text_line_numbers_ignore_unicode_separators() -> None:
    with pytest.raises(MalformedLineError) as excinfo:
        list(classify_text("[a]\nnote=x\u2028y=1\nbroken\n[/]\n"))
    assert excinfo.value.lineno == 3


def test_classify_text_bare_cr_and_missing_final_newline() -> None:
    lines = list(classify_text("[a]\rx=1\r\n[/]"))
    assert [ln.kind for ln in lines] == [
        LineKind.SECTION_OPEN,
        LineKind.KEY_VALUE,
        LineKind.SECTION_CLOSE,
    ]


def test_classify_text_empty_input() -> None:
    assert list(classify_text("")) == []


def test_classify_text_keeps_trailing_blank_lines() -> None:
    lines = list(classify_text("[a]\n[/]\n\n"))
    assert [ln.lineno for ln in lines] == [1, 2, 3]
    assert lines[2].kind is LineKind.BLANK


@pytest.mark.parametrize("raw", ["[ / ]", "[/ ]", "[ /]"])
def test_close_marker_must_be_exact(raw: str) -> None:
    with pytest.raises(MalformedHeaderError) as excinfo:
        classify_line(raw, lineno=4)
    assert "[/]" in str(excinfo.value)


def test_close_marker_allows_surrounding_line_whitespace() -> None:
    assert classify_line("   [/]  ", lineno=1).kind is LineKind.SECTION_CLOSE
