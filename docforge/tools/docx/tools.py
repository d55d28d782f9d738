"""``docx_to_html`` and ``docx_to_pdf`` operations."""

from __future__ import annotations

from dataclasses import dataclass

from ...core.result import OperationResult
from ...core.utils import get_logger
from ..common.interfaces import (
    BaseTool,
    FileTransformRequest,
    OperationRequest,
    file_transform_arguments,
    string_field,
)
from .convert import docx_to_html, docx_to_pdf

LOGGER = get_logger("docforge.tools.docx")


class DocxToHtmlRequest(FileTransformRequest):
    ARGUMENTS = file_transform_arguments(
        "Path to the input DOCX file", "Directory where HTML file should be saved"
    )


@dataclass(frozen=True)
class DocxToPdfRequest(OperationRequest):
    input_path: str
    output_path: str

    ARGUMENTS = (
        string_field("inputPath", "input_path", "Path to the input DOCX file"),
        string_field("outputPath", "output_path", "Path where the output PDF should be saved"),
    )


class DocxToHtmlTool(BaseTool):
    name = "docx_to_html"
    description = "Convert DOCX to HTML while preserving formatting"
    request_type = DocxToHtmlRequest

    def run(self, request: DocxToHtmlRequest) -> OperationResult:
        LOGGER.info("Converting %s to HTML", request.input_path)
        markup = docx_to_html(request.input_path)
        output = self.write_output(request.output_dir, "converted", ".html", markup)
        self.context.resources["result"] = [output]
        return OperationResult.ok(f"Successfully converted DOCX to HTML: {output}")


class DocxToPdfTool(BaseTool):
    name = "docx_to_pdf"
    description = "Convert DOCX files to PDF format"
    request_type = DocxToPdfRequest

    def run(self, request: DocxToPdfRequest) -> OperationResult:
        settings = self.context.settings
        output = docx_to_pdf(
            request.input_path,
            request.output_path,
            soffice=settings.soffice_path,
            timeout=settings.convert_timeout,
        )
        self.context.resources["result"] = [output]
        return OperationResult.ok(f"Successfully converted {request.input_path} to {output}")


__all__ = ["DocxToHtmlRequest", "DocxToPdfRequest", "DocxToHtmlTool", "DocxToPdfTool"]
