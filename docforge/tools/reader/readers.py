"""Text extraction for the formats understood by ``document_reader``."""

from __future__ import annotations

import csv
import datetime as dt
import json
from pathlib import Path
from typing import Callable, Dict, List, Union

from docx import Document
from openpyxl import load_workbook

from ...core.exceptions import UnsupportedFormatError
from ...core.utils import get_logger, resolve_path
from ..html.transforms import html_to_text
from ..pdf.pages import load_reader

LOGGER = get_logger("docforge.reader")

CellValue = Union[str, int, float, bool, None]


def read_pdf(path: Path, encoding: str) -> str:
    reader = load_reader(path)
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def read_docx(path: Path, encoding: str) -> str:
    document = Document(str(path))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def read_txt(path: Path, encoding: str) -> str:
    return path.read_bytes().decode(encoding)


def read_html(path: Path, encoding: str) -> str:
    return html_to_text(path.read_text(encoding=encoding))


def read_csv(path: Path, encoding: str) -> str:
    with path.open(newline="", encoding=encoding) as handle:
        rows = [row for row in csv.reader(handle)]
    return json.dumps(rows)


def _cell_value(value: object) -> CellValue:
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    return str(value)


def read_xlsx(path: Path, encoding: str) -> str:
    """Serialise every worksheet as ``{sheet: [[cell, ...], ...]}``."""

    workbook = load_workbook(str(path), read_only=True, data_only=True)
    try:
        sheets: Dict[str, List[List[CellValue]]] = {}
        for worksheet in workbook.worksheets:
            sheets[worksheet.title] = [
                [_cell_value(value) for value in row]
                for row in worksheet.iter_rows(values_only=True)
            ]
    finally:
        workbook.close()
    return json.dumps(sheets)


READERS: Dict[str, Callable[[Path, str], str]] = {
    ".pdf": read_pdf,
    ".docx": read_docx,
    ".txt": read_txt,
    ".html": read_html,
    ".htm": read_html,
    ".csv": read_csv,
    ".xlsx": read_xlsx,
}


def read_document(path: str | Path, encoding: str = "utf-8") -> str:
    """Return the textual content of ``path``, chosen by its extension."""

    source = resolve_path(path)
    extension = source.suffix.lower()
    reader = READERS.get(extension)
    if reader is None:
        raise UnsupportedFormatError(extension)
    if not source.is_file():
        raise FileNotFoundError(f"No such file: {source}")
    LOGGER.debug("Reading %s as %s", source, extension)
    return reader(source, encoding)


__all__ = ["CellValue", "READERS", "read_document"]
