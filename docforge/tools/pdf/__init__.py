"""PDF merge and split operations."""

from __future__ import annotations

from .pages import PageRange, build_page_indices, merge_pdfs, page_count, split_pdf
from .tools import PdfMergeRequest, PdfMergeTool, PdfSplitRequest, PdfSplitTool

__all__ = [
    "PageRange",
    "build_page_indices",
    "merge_pdfs",
    "page_count",
    "split_pdf",
    "PdfMergeRequest",
    "PdfMergeTool",
    "PdfSplitRequest",
    "PdfSplitTool",
]
