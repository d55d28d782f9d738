"""``document_reader`` operation."""

from __future__ import annotations

from dataclasses import dataclass

from ...core.result import OperationResult
from ..common.interfaces import BaseTool, OperationRequest, string_field
from .readers import read_document


@dataclass(frozen=True)
class DocumentReadRequest(OperationRequest):
    file_path: str

    ARGUMENTS = (string_field("filePath", "file_path", "Path to the file to be read"),)


class DocumentReaderTool(BaseTool):
    name = "document_reader"
    description = (
        "Read content from non-image document-files at specified paths, supporting "
        "various file formats: .pdf, .docx, .txt, .html, .csv, .xlsx"
    )
    request_type = DocumentReadRequest
    produces_files = False

    def run(self, request: DocumentReadRequest) -> OperationResult:
        content = read_document(request.file_path, self.context.settings.text_encoding)
        return OperationResult.ok(content)


__all__ = ["DocumentReadRequest", "DocumentReaderTool"]
