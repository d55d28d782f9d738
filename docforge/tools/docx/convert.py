"""DOCX rendering helpers.

HTML output is produced from the document structure with python-docx. PDF
output is delegated to a headless LibreOffice, the same way the PDF
optimisers shell out to qpdf.
"""

from __future__ import annotations

import html
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Iterator, List, Union

from docx import Document
from docx.document import Document as DocumentObject
from docx.oxml.table import CT_Tbl
from docx.oxml.text.paragraph import CT_P
from docx.table import Table
from docx.text.paragraph import Paragraph

from ...core.exceptions import ConversionError, UnsupportedFormatError
from ...core.utils import ensure_output_parent, get_logger, resolve_path

LOGGER = get_logger("docforge.docx")

Block = Union[Paragraph, Table]

LIST_STYLES = {
    "List Bullet": "ul",
    "List Bullet 2": "ul",
    "List Paragraph": "ul",
    "List Number": "ol",
    "List Number 2": "ol",
}


def iter_block_items(document: DocumentObject) -> Iterator[Block]:
    """Yield paragraphs and tables in document order."""

    for element in document.element.body.iterchildren():
        if isinstance(element, CT_P):
            yield Paragraph(element, document)
        elif isinstance(element, CT_Tbl):
            yield Table(element, document)


def _style_name(paragraph: Paragraph) -> str:
    style = paragraph.style
    return style.name if style is not None and style.name else ""


def _heading_level(style_name: str) -> int | None:
    if style_name == "Title":
        return 1
    if style_name.startswith("Heading "):
        level = style_name.replace("Heading ", "")
        if level.isdigit():
            return min(max(int(level), 1), 6)
    return None


def _render_runs(paragraph: Paragraph) -> str:
    parts: List[str] = []
    for run in paragraph.runs:
        if not run.text:
            continue
        text = html.escape(run.text)
        if run.underline:
            text = f"<u>{text}</u>"
        if run.italic:
            text = f"<em>{text}</em>"
        if run.bold:
            text = f"<strong>{text}</strong>"
        parts.append(text)
    return "".join(parts)


def _render_table(table: Table) -> str:
    rows = []
    for row in table.rows:
        cells = "".join(f"<td>{html.escape(cell.text.strip())}</td>" for cell in row.cells)
        rows.append(f"<tr>{cells}</tr>")
    return f"<table>{''.join(rows)}</table>"


def docx_to_html(path: str | Path) -> str:
    """Render the body of a DOCX document as an HTML fragment."""

    document = Document(str(resolve_path(path)))
    parts: List[str] = []
    open_list: str | None = None

    for block in iter_block_items(document):
        list_tag = LIST_STYLES.get(_style_name(block)) if isinstance(block, Paragraph) else None
        if open_list and list_tag != open_list:
            parts.append(f"</{open_list}>")
            open_list = None

        if isinstance(block, Table):
            parts.append(_render_table(block))
            continue

        content = _render_runs(block)
        if not content.strip():
            continue
        if list_tag:
            if open_list is None:
                parts.append(f"<{list_tag}>")
                open_list = list_tag
            parts.append(f"<li>{content}</li>")
            continue
        level = _heading_level(_style_name(block))
        tag = f"h{level}" if level else "p"
        parts.append(f"<{tag}>{content}</{tag}>")

    if open_list:
        parts.append(f"</{open_list}>")
    return "".join(parts)


def find_soffice(explicit: str | None = None) -> str:
    if explicit:
        return explicit
    executable = shutil.which("soffice") or shutil.which("libreoffice")
    if not executable:
        raise ConversionError("LibreOffice is required for DOCX to PDF conversion")
    return executable


def docx_to_pdf(
    input_path: str | Path,
    output_path: str | Path,
    *,
    soffice: str | None = None,
    timeout: int = 120,
) -> Path:
    """Render ``input_path`` to PDF at exactly ``output_path``."""

    source = resolve_path(input_path)
    if source.suffix.lower() != ".docx":
        raise UnsupportedFormatError(source.suffix, "Input file must be a .docx file")
    destination = resolve_path(output_path)
    if destination.suffix.lower() != ".pdf":
        raise UnsupportedFormatError(destination.suffix, "Output file must have .pdf extension")
    if not source.is_file():
        raise FileNotFoundError(f"No such file: {source}")

    executable = find_soffice(soffice)
    with tempfile.TemporaryDirectory(prefix="docforge-") as workdir:
        command = [
            executable,
            "--headless",
            "--convert-to",
            "pdf",
            "--outdir",
            workdir,
            str(source),
        ]
        LOGGER.debug("Running LibreOffice command: %s", command)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ConversionError(f"DOCX to PDF conversion timed out after {timeout}s") from exc
        except OSError as exc:
            raise ConversionError(f"Failed to execute LibreOffice: {exc}") from exc

        if result.returncode != 0:
            LOGGER.error("LibreOffice failed with code %s: %s", result.returncode, result.stderr)
            raise ConversionError(
                (result.stderr or result.stdout or "DOCX to PDF conversion failed").strip()
            )

        produced = Path(workdir) / f"{source.stem}.pdf"
        if not produced.exists():
            raise ConversionError("DOCX to PDF conversion produced no output")

        ensure_output_parent(destination)
        shutil.move(str(produced), str(destination))

    LOGGER.info("Converted %s to %s", source, destination)
    return destination


__all__ = ["iter_block_items", "docx_to_html", "docx_to_pdf", "find_soffice"]
