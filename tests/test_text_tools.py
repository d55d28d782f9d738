from __future__ import annotations

import re
from pathlib import Path
from typing import Callable

from docforge.tools import dispatch
from docforge.tools.common.interfaces import OperationContext


def test_text_splitter_by_lines(
    text_file_factory: Callable[..., Path], output_dir: Path, context: OperationContext
) -> None:
    source = text_file_factory("lines.txt", "1\n2\n3\n4\n5")

    result = dispatch(
        "text_splitter",
        {"inputPath": str(source), "outputDir": str(output_dir), "splitBy": "lines", "value": 2},
        context=context,
    )

    assert result.success, result.error
    assert result.data.startswith("Successfully split text into 3 parts: ")
    outputs = context.resources["result"]
    assert [path.read_text(encoding="utf-8") for path in outputs] == ["1\n2", "3\n4", "5"]
    batch_ids = {re.fullmatch(r"part_([0-9a-f]{18})_\d+\.txt", path.name).group(1) for path in outputs}
    assert len(batch_ids) == 1


def test_text_splitter_by_delimiter(
    text_file_factory: Callable[..., Path], output_dir: Path, context: OperationContext
) -> None:
    source = text_file_factory("csv.txt", "a,b,,c")

    result = dispatch(
        "text_splitter",
        {"inputPath": str(source), "outputDir": str(output_dir), "splitBy": "delimiter", "value": ","},
        context=context,
    )

    assert result.success
    parts = [path.read_text(encoding="utf-8") for path in context.resources["result"]]
    assert parts == ["a", "b", "", "c"]


def test_text_splitter_rejects_bad_line_count(
    text_file_factory: Callable[..., Path], output_dir: Path
) -> None:
    source = text_file_factory("lines.txt", "1\n2")

    result = dispatch(
        "text_splitter",
        {"inputPath": str(source), "outputDir": str(output_dir), "splitBy": "lines", "value": "0"},
    )

    assert not result.success
    assert "Invalid line count" in result.error
    assert not output_dir.exists()


def test_text_splitter_rejects_unknown_mode(tmp_path: Path) -> None:
    result = dispatch(
        "text_splitter",
        {"inputPath": "x.txt", "outputDir": str(tmp_path), "splitBy": "words", "value": 3},
    )

    assert result.error == "Invalid arguments for text_splitter: 'splitBy' must be one of: lines, delimiter"


def test_text_diff_writes_marked_lines(
    text_file_factory: Callable[..., Path], output_dir: Path, context: OperationContext
) -> None:
    first = text_file_factory("a.txt", "a\nb")
    second = text_file_factory("b.txt", "a\nc")

    result = dispatch(
        "text_diff",
        {"file1Path": str(first), "file2Path": str(second), "outputDir": str(output_dir)},
        context=context,
    )

    assert result.success
    (output,) = context.resources["result"]
    assert output.name.startswith("diff_")
    assert result.data == f"Successfully compared texts: {output}"
    assert output.read_text(encoding="utf-8") == "  a\n- b\n+ c\n"


def test_text_formatter(
    text_file_factory: Callable[..., Path], output_dir: Path, context: OperationContext
) -> None:
    source = text_file_factory("messy.txt", "  hello  \n\n\n\nworld  ")

    result = dispatch(
        "text_formatter",
        {"inputPath": str(source), "outputDir": str(output_dir)},
        context=context,
    )

    assert result.success
    (output,) = context.resources["result"]
    assert output.name.startswith("formatted_") and output.suffix == ".txt"
    assert output.read_text(encoding="utf-8") == "hello\n\nworld"


def test_text_encoding_converter(
    text_file_factory: Callable[..., Path], output_dir: Path, context: OperationContext
) -> None:
    source = text_file_factory("legacy.txt", "café crème", encoding="cp1252")

    result = dispatch(
        "text_encoding_converter",
        {
            "inputPath": str(source),
            "outputDir": str(output_dir),
            "fromEncoding": "cp1252",
            "toEncoding": "utf-8",
        },
        context=context,
    )

    assert result.success
    (output,) = context.resources["result"]
    assert output.name.startswith("converted_")
    assert output.read_bytes() == "café crème".encode("utf-8")


def test_text_encoding_converter_reports_unknown_codec(
    text_file_factory: Callable[..., Path], output_dir: Path
) -> None:
    source = text_file_factory("plain.txt", "abc")

    result = dispatch(
        "text_encoding_converter",
        {
            "inputPath": str(source),
            "outputDir": str(output_dir),
            "fromEncoding": "utf-8",
            "toEncoding": "klingon",
        },
    )

    assert result.error == "Unsupported encoding: klingon"


def test_text_splitter_keeps_crlf_line_endings(tmp_path: Path, context: OperationContext) -> None:
    source = tmp_path / "windows.txt"
    source.write_bytes(b"a\r\nb\r\nc")

    result = dispatch(
        "text_splitter",
        {"inputPath": str(source), "outputDir": str(tmp_path / "by-delim"), "splitBy": "delimiter", "value": "\r\n"},
        context=context,
    )

    assert result.success, result.error
    assert [path.read_bytes() for path in context.resources["result"]] == [b"a", b"b", b"c"]


def test_text_splitter_by_lines_rejoins_crlf_bytes(tmp_path: Path, context: OperationContext) -> None:
    original = b"a\r\nb\r\nc\r\nd"
    source = tmp_path / "windows.txt"
    source.write_bytes(original)

    result = dispatch(
        "text_splitter",
        {"inputPath": str(source), "outputDir": str(tmp_path / "by-lines"), "splitBy": "lines", "value": 2},
        context=context,
    )

    assert result.success, result.error
    chunks = [path.read_bytes() for path in context.resources["result"]]
    assert len(chunks) == 2
    assert b"\n".join(chunks) == original
