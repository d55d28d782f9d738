"""DOCX conversion operations."""

from __future__ import annotations

from .convert import docx_to_html, docx_to_pdf
from .tools import DocxToHtmlTool, DocxToPdfTool

__all__ = ["docx_to_html", "docx_to_pdf", "DocxToHtmlTool", "DocxToPdfTool"]
