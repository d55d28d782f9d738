"""Custom exceptions raised by :mod:`docforge`."""

from __future__ import annotations


class DocForgeError(Exception):
    """Base exception for all errors raised by :mod:`docforge`."""


class InvalidArgumentsError(DocForgeError):
    """Raised when an argument bag does not match an operation's fields."""


class InvalidPageRangeError(DocForgeError):
    """Raised when a page range falls outside the source document."""

    def __init__(self, start: int, end: int, total_pages: int) -> None:
        self.start = start
        self.end = end
        self.total_pages = total_pages
        if start < 1 or end < 1:
            message = f"Invalid page range: {start}-{end}. Page numbers start at 1"
        elif start > end:
            message = f"Invalid page range: start ({start}) is greater than end ({end})"
        else:
            message = f"Invalid page range: {start}-{end}. PDF only has {total_pages} pages"
        super().__init__(message)


class PdfMergeError(DocForgeError):
    """Raised when the merge operation fails."""


class PdfSplitError(DocForgeError):
    """Raised when the split operation fails."""


class InvalidSplitValueError(DocForgeError):
    """Raised when a text split receives an unusable line count or delimiter."""


class UnsupportedFormatError(DocForgeError):
    """Raised when a file extension is not handled by an operation."""

    def __init__(self, extension: str, message: str | None = None) -> None:
        self.extension = extension
        super().__init__(message or f"Unsupported file format: {extension or '<none>'}")


class UnsupportedEncodingError(DocForgeError):
    """Raised when a codec name is not known to Python."""

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"Unsupported encoding: {encoding}")


class ConversionError(DocForgeError):
    """Raised when an external renderer fails to produce output."""


__all__ = [
    "DocForgeError",
    "InvalidArgumentsError",
    "InvalidPageRangeError",
    "PdfMergeError",
    "PdfSplitError",
    "InvalidSplitValueError",
    "UnsupportedFormatError",
    "UnsupportedEncodingError",
    "ConversionError",
]
