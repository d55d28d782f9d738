"""Document operations (PDF, DOCX, HTML and plain text) behind one dispatcher."""

from __future__ import annotations

from .core import (
    ConversionError,
    DocForgeError,
    InvalidArgumentsError,
    InvalidPageRangeError,
    InvalidSplitValueError,
    OperationResult,
    PdfMergeError,
    PdfSplitError,
    Settings,
    UnsupportedEncodingError,
    UnsupportedFormatError,
    get_settings,
)
from .tools import BUILTIN_TOOLS, dispatch, registry
from .tools.common.interfaces import OperationContext

__version__ = "0.1.0"

__all__ = [
    "BUILTIN_TOOLS",
    "ConversionError",
    "DocForgeError",
    "InvalidArgumentsError",
    "InvalidPageRangeError",
    "InvalidSplitValueError",
    "OperationContext",
    "OperationResult",
    "PdfMergeError",
    "PdfSplitError",
    "Settings",
    "UnsupportedEncodingError",
    "UnsupportedFormatError",
    "dispatch",
    "get_settings",
    "registry",
    "__version__",
]
