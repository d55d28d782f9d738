"""Shared plumbing for docforge operations."""

from __future__ import annotations

from .exceptions import (
    ConversionError,
    DocForgeError,
    InvalidArgumentsError,
    InvalidPageRangeError,
    InvalidSplitValueError,
    PdfMergeError,
    PdfSplitError,
    UnsupportedEncodingError,
    UnsupportedFormatError,
)
from .result import OperationResult
from .settings import Settings, get_settings
from .utils import (
    build_output_filename,
    ensure_output_dir,
    ensure_output_parent,
    generate_unique_id,
    get_logger,
    resolve_path,
)

__all__ = [
    "ConversionError",
    "DocForgeError",
    "InvalidArgumentsError",
    "InvalidPageRangeError",
    "InvalidSplitValueError",
    "PdfMergeError",
    "PdfSplitError",
    "UnsupportedFormatError",
    "UnsupportedEncodingError",
    "OperationResult",
    "Settings",
    "get_settings",
    "build_output_filename",
    "ensure_output_dir",
    "ensure_output_parent",
    "generate_unique_id",
    "get_logger",
    "resolve_path",
]
