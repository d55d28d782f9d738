from __future__ import annotations

import pytest

from docforge.core.exceptions import InvalidSplitValueError, UnsupportedEncodingError
from docforge.tools.text import (
    ChangeKind,
    DiffRun,
    SplitMode,
    detect_encoding,
    diff_lines,
    format_text,
    render_diff,
    split_by_delimiter,
    split_by_lines,
    split_text,
    transcode,
)
from docforge.tools.text.partition import parse_line_count


def test_split_by_delimiter_keeps_empty_fragments() -> None:
    assert split_by_delimiter("a,b,,c", ",") == ["a", "b", "", "c"]


def test_split_by_delimiter_without_match_returns_whole_text() -> None:
    assert split_by_delimiter("abc", "|") == ["abc"]


def test_split_by_delimiter_rejects_empty_delimiter() -> None:
    with pytest.raises(InvalidSplitValueError):
        split_by_delimiter("abc", "")


def test_split_by_lines_last_chunk_may_be_short() -> None:
    assert split_by_lines("1\n2\n3\n4\n5", 2) == ["1\n2", "3\n4", "5"]


@pytest.mark.parametrize("count", [1, 2, 3, 7, 50])
def test_split_by_lines_rejoins_to_original(count: int) -> None:
    text = "alpha\nbeta\n\ngamma\ndelta\nepsilon\n"
    assert "\n".join(split_by_lines(text, count)) == text


@pytest.mark.parametrize("value", [0, -3, "zero", "", True, "1.5"])
def test_parse_line_count_rejects_non_positive_and_non_numeric(value: object) -> None:
    with pytest.raises(InvalidSplitValueError):
        parse_line_count(value)  # type: ignore[arg-type]


def test_split_text_dispatches_on_mode() -> None:
    assert split_text("a\nb\nc", SplitMode.LINES, "2") == ["a\nb", "c"]
    assert split_text("a;b", "delimiter", ";") == ["a", "b"]


def test_diff_identical_inputs_is_all_unchanged() -> None:
    runs = diff_lines("one\ntwo\nthree", "one\ntwo\nthree")

    assert [run.kind for run in runs] == [ChangeKind.UNCHANGED]
    assert render_diff(runs) == "  one\n  two\n  three\n"


def test_diff_replaced_line_is_removed_then_added() -> None:
    runs = diff_lines("a\nb", "a\nc")

    assert runs == [
        DiffRun(ChangeKind.UNCHANGED, ("a",)),
        DiffRun(ChangeKind.REMOVED, ("b",)),
        DiffRun(ChangeKind.ADDED, ("c",)),
    ]
    assert render_diff(runs) == "  a\n- b\n+ c\n"


def test_diff_pure_insertion_and_deletion() -> None:
    assert render_diff(diff_lines("a\nc", "a\nb\nc")) == "  a\n+ b\n  c\n"
    assert render_diff(diff_lines("a\nb\nc", "a\nc")) == "  a\n- b\n  c\n"


def test_diff_against_empty_input() -> None:
    assert render_diff(diff_lines("", "x\ny")) == "+ x\n+ y\n"
    assert diff_lines("", "") == []


def test_format_text_trims_and_collapses_blank_lines() -> None:
    assert format_text("  first  \n\n\n\tsecond\n   \n\nthird") == "first\n\nsecond\n\nthird"


def test_transcode_between_codecs() -> None:
    raw = "héllo wörld".encode("latin-1")
    assert transcode(raw, "latin-1", "utf8") == "héllo wörld".encode("utf-8")


def test_transcode_rejects_unknown_codec() -> None:
    with pytest.raises(UnsupportedEncodingError):
        transcode(b"abc", "not-a-codec", "utf-8")


def test_detect_encoding_falls_back_for_empty_input() -> None:
    assert detect_encoding(b"") == "utf-8"
    assert detect_encoding(b"", fallback="ascii") == "ascii"


def test_detect_encoding_recognises_utf8() -> None:
    sample = ("Grüße aus Köln, schöne Straße. " * 20).encode("utf-8")
    assert detect_encoding(sample) == "utf-8"
