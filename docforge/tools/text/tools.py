"""Plain text operations: split, diff, format and encoding conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...core.exceptions import InvalidArgumentsError
from ...core.result import OperationResult
from ...core.utils import generate_unique_id, get_logger, resolve_path
from ..common.interfaces import (
    ArgumentSpec,
    BaseTool,
    FileTransformRequest,
    OperationRequest,
    file_transform_arguments,
    string_field,
)
from .encoding import transcode
from .partition import SplitMode, diff_lines, format_text, render_diff, split_text

LOGGER = get_logger("docforge.tools.text")


def _split_value(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidArgumentsError("'value' must be a string or an integer")
    return str(value)


@dataclass(frozen=True)
class TextSplitRequest(OperationRequest):
    input_path: str
    output_dir: str
    split_by: str
    value: str

    ARGUMENTS = (
        string_field("inputPath", "input_path", "Path to the input text file"),
        string_field("outputDir", "output_dir", "Directory where split files should be saved"),
        string_field(
            "splitBy",
            "split_by",
            "Split method: by line count or delimiter",
            enum=tuple(mode.value for mode in SplitMode),
        ),
        ArgumentSpec(
            "value",
            "value",
            "Line count (number) or delimiter string",
            converter=_split_value,
        ),
    )


@dataclass(frozen=True)
class TextDiffRequest(OperationRequest):
    file1_path: str
    file2_path: str
    output_dir: str

    ARGUMENTS = (
        string_field("file1Path", "file1_path", "Path to the first text file"),
        string_field("file2Path", "file2_path", "Path to the second text file"),
        string_field("outputDir", "output_dir", "Directory where diff result should be saved"),
    )


class TextFormatRequest(FileTransformRequest):
    ARGUMENTS = file_transform_arguments(
        "Path to the input text file", "Directory where formatted file should be saved"
    )


@dataclass(frozen=True)
class TextEncodingRequest(OperationRequest):
    input_path: str
    output_dir: str
    from_encoding: str
    to_encoding: str

    ARGUMENTS = (
        string_field("inputPath", "input_path", "Path to the input text file"),
        string_field("outputDir", "output_dir", "Directory where converted file should be saved"),
        string_field(
            "fromEncoding",
            "from_encoding",
            "Source encoding (e.g., 'big5', 'gbk', 'utf8', or 'auto' to detect)",
        ),
        string_field("toEncoding", "to_encoding", "Target encoding (e.g., 'utf8', 'big5', 'gbk')"),
    )


class TextSplitTool(BaseTool):
    name = "text_splitter"
    description = "Split text file by specified delimiter or line count"
    request_type = TextSplitRequest

    def run(self, request: TextSplitRequest) -> OperationResult:
        LOGGER.info("Splitting %s by %s (%r)", request.input_path, request.split_by, request.value)
        parts = split_text(self.read_text(request.input_path), request.split_by, request.value)

        batch_id = generate_unique_id()
        outputs = []
        for number, part in enumerate(parts, start=1):
            outputs.append(
                self.write_output(request.output_dir, "part", ".txt", part, unique_id=batch_id, part=number)
            )
            LOGGER.debug("Written part %d to %s", number, outputs[-1])

        self.context.resources["result"] = outputs
        joined = ", ".join(str(path) for path in outputs)
        return OperationResult.ok(f"Successfully split text into {len(outputs)} parts: {joined}")


class TextDiffTool(BaseTool):
    name = "text_diff"
    description = "Compare two text files and show differences"
    request_type = TextDiffRequest

    def run(self, request: TextDiffRequest) -> OperationResult:
        LOGGER.info("Comparing %s with %s", request.file1_path, request.file2_path)
        runs = diff_lines(self.read_text(request.file1_path), self.read_text(request.file2_path))
        output = self.write_output(request.output_dir, "diff", ".txt", render_diff(runs))
        self.context.resources["result"] = [output]
        return OperationResult.ok(f"Successfully compared texts: {output}")


class TextFormatTool(BaseTool):
    name = "text_formatter"
    description = "Format text with proper indentation and line spacing"
    request_type = TextFormatRequest

    def run(self, request: TextFormatRequest) -> OperationResult:
        LOGGER.info("Formatting %s", request.input_path)
        formatted = format_text(self.read_text(request.input_path))
        output = self.write_output(request.output_dir, "formatted", ".txt", formatted)
        self.context.resources["result"] = [output]
        return OperationResult.ok(f"Successfully formatted text: {output}")


class TextEncodingTool(BaseTool):
    name = "text_encoding_converter"
    description = "Convert text between different encodings"
    request_type = TextEncodingRequest

    def run(self, request: TextEncodingRequest) -> OperationResult:
        LOGGER.info(
            "Converting %s from %s to %s",
            request.input_path,
            request.from_encoding,
            request.to_encoding,
        )
        raw = resolve_path(request.input_path).read_bytes()
        converted = transcode(raw, request.from_encoding, request.to_encoding)
        output = self.write_output(request.output_dir, "converted", ".txt", converted)
        self.context.resources["result"] = [output]
        return OperationResult.ok(f"Successfully converted text encoding: {output}")


__all__ = [
    "TextSplitRequest",
    "TextDiffRequest",
    "TextFormatRequest",
    "TextEncodingRequest",
    "TextSplitTool",
    "TextDiffTool",
    "TextFormatTool",
    "TextEncodingTool",
]
