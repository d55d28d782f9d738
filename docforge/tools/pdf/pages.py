"""Page-accurate merge and split of PDF documents.

Pages are copied as-is with :mod:`pypdf`; nothing is re-rendered. Page
ranges are 1-based and inclusive on the caller side and are turned into
0-based page indices only here.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence, Union

from pypdf import PdfReader, PdfWriter

from ...core.exceptions import (
    InvalidArgumentsError,
    InvalidPageRangeError,
    PdfMergeError,
    PdfSplitError,
)
from ...core.utils import (
    build_output_filename,
    ensure_output_dir,
    generate_unique_id,
    get_logger,
    resolve_path,
)

LOGGER = get_logger("docforge.pdf")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class PageRange:
    """Represents an inclusive, 1-based page range."""

    start: int
    end: int

    def validate(self, total_pages: int) -> None:
        if self.start < 1 or self.end < 1 or self.start > self.end or self.end > total_pages:
            raise InvalidPageRangeError(self.start, self.end, total_pages)

    def page_indices(self) -> list[int]:
        """Return the 0-based indices covered by this range, in order."""

        return list(range(self.start - 1, self.end))

    def __len__(self) -> int:
        return max(self.end - self.start + 1, 0)


def _page_number(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentsError(f"page range '{key}' must be an integer")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidArgumentsError(f"page range '{key}' must be an integer")


def coerce_page_ranges(value: Any) -> tuple[PageRange, ...]:
    """Turn the ``pageRanges`` wire value into :class:`PageRange` objects.

    Only the shape is checked here; bounds are checked against the loaded
    document by :func:`build_page_indices`.
    """

    if not isinstance(value, (list, tuple)):
        raise InvalidArgumentsError("'pageRanges' must be an array")
    ranges: List[PageRange] = []
    for item in value:
        if not isinstance(item, Mapping) or "start" not in item or "end" not in item:
            raise InvalidArgumentsError("each page range needs 'start' and 'end'")
        ranges.append(PageRange(_page_number(item["start"], "start"), _page_number(item["end"], "end")))
    return tuple(ranges)


def load_reader(path: PathLike) -> PdfReader:
    pdf_path = resolve_path(path)
    reader = PdfReader(str(pdf_path))
    if reader.is_encrypted:
        LOGGER.debug("Attempting to decrypt encrypted PDF %s", pdf_path)
        reader.decrypt("")
    return reader


def page_count(path: PathLike) -> int:
    return len(load_reader(path).pages)


def build_page_indices(ranges: Sequence[PageRange], total_pages: int) -> list[list[int]]:
    """Validate every range against ``total_pages`` and return their indices.

    All ranges are checked before any index list is returned so a bad range
    anywhere in the request rejects the whole request.
    """

    for page_range in ranges:
        page_range.validate(total_pages)
    return [page_range.page_indices() for page_range in ranges]


def _write_document(writer: PdfWriter, destination: Path) -> None:
    with destination.open("wb") as output_stream:
        writer.write(output_stream)


def merge_pdfs(
    inputs: Iterable[PathLike],
    output_dir: PathLike,
    *,
    unique_id: str | None = None,
) -> Path:
    """Concatenate the pages of *inputs*, in order, into one new PDF.

    Every source is loaded before anything is written, so an unreadable input
    leaves no output behind.
    """

    pdf_paths = [resolve_path(path) for path in inputs]
    if not pdf_paths:
        raise PdfMergeError("No input PDFs provided")

    readers: list[tuple[Path, PdfReader]] = []
    for pdf_path in pdf_paths:
        LOGGER.debug("Loading input PDF %s", pdf_path)
        try:
            readers.append((pdf_path, load_reader(pdf_path)))
        except FileNotFoundError:
            raise
        except Exception as exc:
            raise PdfMergeError(f"Failed to load PDF {pdf_path}: {exc}") from exc

    writer = PdfWriter()
    for pdf_path, reader in readers:
        LOGGER.debug("Copying %d page(s) from %s", len(reader.pages), pdf_path)
        for page in reader.pages:
            writer.add_page(page)

    directory = ensure_output_dir(output_dir)
    destination = directory / build_output_filename("merged", unique_id or generate_unique_id(), ".pdf")
    try:
        _write_document(writer, destination)
    except Exception:
        destination.unlink(missing_ok=True)
        raise

    LOGGER.info("Merged %d PDFs (%d pages) into %s", len(pdf_paths), len(writer.pages), destination)
    return destination


def split_pdf(
    input_path: PathLike,
    output_dir: PathLike,
    ranges: Sequence[PageRange],
    *,
    unique_id: str | None = None,
) -> list[Path]:
    """Write one PDF per range in *ranges* and return their paths.

    Outputs are numbered by their position in *ranges*, so overlapping and
    out-of-order ranges are fine. Either every output is written or none is.
    """

    if not ranges:
        raise PdfSplitError("No page ranges provided")

    source = resolve_path(input_path)
    reader = load_reader(source)
    total_pages = len(reader.pages)
    LOGGER.debug("Loaded %s with %d pages", source, total_pages)

    index_sets = build_page_indices(ranges, total_pages)

    writers: list[PdfWriter] = []
    for indices in index_sets:
        writer = PdfWriter()
        for index in indices:
            writer.add_page(reader.pages[index])
        writers.append(writer)

    directory = ensure_output_dir(output_dir)
    batch_id = unique_id or generate_unique_id()
    written: list[Path] = []
    try:
        for number, (page_range, writer) in enumerate(zip(ranges, writers), start=1):
            destination = directory / build_output_filename("split", batch_id, ".pdf", number)
            LOGGER.debug("Writing pages %s-%s to %s", page_range.start, page_range.end, destination)
            written.append(destination)
            _write_document(writer, destination)
    except Exception:
        for path in written:
            path.unlink(missing_ok=True)
        raise

    LOGGER.info("Split %s into %d file(s)", source, len(written))
    return written


__all__ = [
    "PageRange",
    "coerce_page_ranges",
    "load_reader",
    "page_count",
    "build_page_indices",
    "merge_pdfs",
    "split_pdf",
]
