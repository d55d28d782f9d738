"""Plain text partitioning, diffing and transcoding."""

from __future__ import annotations

from .encoding import detect_encoding, transcode
from .partition import (
    ChangeKind,
    DiffRun,
    SplitMode,
    diff_lines,
    format_text,
    render_diff,
    split_by_delimiter,
    split_by_lines,
    split_text,
)
from .tools import TextDiffTool, TextEncodingTool, TextFormatTool, TextSplitTool

__all__ = [
    "detect_encoding",
    "transcode",
    "ChangeKind",
    "DiffRun",
    "SplitMode",
    "diff_lines",
    "format_text",
    "render_diff",
    "split_by_delimiter",
    "split_by_lines",
    "split_text",
    "TextDiffTool",
    "TextEncodingTool",
    "TextFormatTool",
    "TextSplitTool",
]
