"""Namespace for the built-in docforge tools and their registry."""

from __future__ import annotations

from typing import Any, Mapping

from ..core.result import OperationResult
from .common.interfaces import OperationContext
from .common.pipeline import ToolRegistry
from .docx import DocxToHtmlTool, DocxToPdfTool
from .html import (
    HtmlCleanTool,
    HtmlExtractResourcesTool,
    HtmlFormatTool,
    HtmlToMarkdownTool,
    HtmlToTextTool,
)
from .pdf import PdfMergeTool, PdfSplitTool
from .reader import DocumentReaderTool
from .text import TextDiffTool, TextEncodingTool, TextFormatTool, TextSplitTool

BUILTIN_TOOLS = (
    DocumentReaderTool,
    PdfMergeTool,
    PdfSplitTool,
    DocxToPdfTool,
    DocxToHtmlTool,
    HtmlCleanTool,
    HtmlToTextTool,
    HtmlToMarkdownTool,
    HtmlExtractResourcesTool,
    HtmlFormatTool,
    TextDiffTool,
    TextSplitTool,
    TextFormatTool,
    TextEncodingTool,
)

registry = ToolRegistry(BUILTIN_TOOLS)


def dispatch(
    name: str,
    arguments: Mapping[str, Any] | None,
    *,
    context: OperationContext | None = None,
) -> OperationResult:
    return registry.dispatch(name, arguments, context=context)


__all__ = ["BUILTIN_TOOLS", "registry", "dispatch", "OperationContext", "ToolRegistry"]
