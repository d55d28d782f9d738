"""HTML operations."""

from __future__ import annotations

from .tools import (
    HtmlCleanTool,
    HtmlExtractResourcesTool,
    HtmlFormatTool,
    HtmlToMarkdownTool,
    HtmlToTextTool,
)
from .transforms import clean_html, extract_resources, format_html, html_to_markdown, html_to_text

__all__ = [
    "HtmlCleanTool",
    "HtmlExtractResourcesTool",
    "HtmlFormatTool",
    "HtmlToMarkdownTool",
    "HtmlToTextTool",
    "clean_html",
    "extract_resources",
    "format_html",
    "html_to_markdown",
    "html_to_text",
]
