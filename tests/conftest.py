from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence
import sys

import pytest
from docx import Document
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docforge.core.settings import Settings  # noqa: E402
from docforge.tools.common.interfaces import OperationContext  # noqa: E402


def _write_pdf(path: Path, widths: Sequence[float]) -> Path:
    writer = PdfWriter()
    for width in widths:
        writer.add_blank_page(width=width, height=200)
    with path.open("wb") as stream:
        writer.write(stream)
    return path


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    """Five pages whose widths (101..105) identify their original position."""

    return _write_pdf(tmp_path / "sample.pdf", [101, 102, 103, 104, 105])


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, pages: int = 1, width: float = 72) -> Path:
        return _write_pdf(tmp_path / filename, [width] * pages)

    return _create


@pytest.fixture()
def text_file_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, content: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / filename
        path.write_bytes(content.encode(encoding))
        return path

    return _create


@pytest.fixture()
def sample_html(tmp_path: Path) -> Path:
    path = tmp_path / "page.html"
    path.write_text(
        "<html><head><title>Ignored</title><style>p { color: red; }</style></head>"
        "<body>"
        '<h1 onclick="go()">Title</h1>'
        '<p style="margin: 0">Hello <b>world</b></p>'
        "<script>alert('x');</script>"
        '<img src="logo.png" alt="logo">'
        '<a href="https://example.com">Example</a>'
        '<video controls><source src="clip.mp4" type="video/mp4"></video>'
        "</body></html>",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def sample_docx(tmp_path: Path) -> Path:
    path = tmp_path / "report.docx"
    document = Document()
    document.add_heading("Quarterly Report", level=1)
    paragraph = document.add_paragraph("Revenue is ")
    paragraph.add_run("up").bold = True
    paragraph.add_run(" this quarter.")
    document.add_paragraph("First point", style="List Bullet")
    document.add_paragraph("Second point", style="List Bullet")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Region"
    table.cell(0, 1).text = "Total"
    table.cell(1, 0).text = "North"
    table.cell(1, 1).text = "42"
    document.save(str(path))
    return path


@pytest.fixture()
def context() -> OperationContext:
    return OperationContext(settings=Settings())


@pytest.fixture()
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"
