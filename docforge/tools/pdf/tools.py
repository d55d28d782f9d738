"""``pdf_merger`` and ``pdf_splitter`` operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ...core.exceptions import InvalidArgumentsError
from ...core.result import OperationResult
from ...core.utils import get_logger
from ..common.interfaces import ArgumentSpec, BaseTool, OperationRequest, string_field
from .pages import PageRange, coerce_page_ranges, merge_pdfs, split_pdf

LOGGER = get_logger("docforge.tools.pdf")


@dataclass(frozen=True)
class PdfMergeRequest(OperationRequest):
    input_paths: tuple[str, ...]
    output_dir: str

    ARGUMENTS = (
        ArgumentSpec(
            "inputPaths",
            "input_paths",
            "Paths to the input PDF files",
            json_type="array",
            items={"type": "string"},
        ),
        string_field("outputDir", "output_dir", "Directory where merged PDFs should be saved"),
    )

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> "PdfMergeRequest":
        request = super().from_arguments(arguments)
        if not request.input_paths:
            raise InvalidArgumentsError("'inputPaths' must list at least one PDF")
        return request


@dataclass(frozen=True)
class PdfSplitRequest(OperationRequest):
    input_path: str
    output_dir: str
    page_ranges: tuple[PageRange, ...]

    ARGUMENTS = (
        string_field("inputPath", "input_path", "Path to the input PDF file"),
        string_field("outputDir", "output_dir", "Directory where split PDFs should be saved"),
        ArgumentSpec(
            "pageRanges",
            "page_ranges",
            "Array of page ranges to split",
            json_type="array",
            items={
                "type": "object",
                "properties": {"start": {"type": "number"}, "end": {"type": "number"}},
            },
            converter=coerce_page_ranges,
        ),
    )


class PdfMergeTool(BaseTool):
    name = "pdf_merger"
    description = "Merge multiple PDF files into one"
    request_type = PdfMergeRequest

    def run(self, request: PdfMergeRequest) -> OperationResult:
        LOGGER.info("Merging %d PDF(s) into %s", len(request.input_paths), request.output_dir)
        output = merge_pdfs(request.input_paths, request.output_dir)
        self.context.resources["result"] = [output]
        return OperationResult.ok(
            f"Successfully merged {len(request.input_paths)} PDFs into {output}"
        )


class PdfSplitTool(BaseTool):
    name = "pdf_splitter"
    description = "Split a PDF file into multiple files"
    request_type = PdfSplitRequest

    def run(self, request: PdfSplitRequest) -> OperationResult:
        LOGGER.info("Splitting %s into %d range(s)", request.input_path, len(request.page_ranges))
        outputs = split_pdf(request.input_path, request.output_dir, request.page_ranges)
        self.context.resources["result"] = outputs
        joined = ", ".join(str(path) for path in outputs)
        return OperationResult.ok(f"Successfully split PDF into {len(outputs)} files: {joined}")


__all__ = ["PdfMergeRequest", "PdfSplitRequest", "PdfMergeTool", "PdfSplitTool"]
