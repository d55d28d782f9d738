"""Document content extraction."""

from __future__ import annotations

from .readers import CellValue, read_document
from .tools import DocumentReaderTool

__all__ = ["CellValue", "read_document", "DocumentReaderTool"]
