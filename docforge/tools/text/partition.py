"""Pure text partitioning and line diffing.

Nothing here touches the filesystem; handlers persist the fragments.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher
from enum import Enum
from typing import Iterable, List

from ...core.exceptions import InvalidSplitValueError


class SplitMode(str, Enum):
    LINES = "lines"
    DELIMITER = "delimiter"


def parse_line_count(value: str | int) -> int:
    """Return ``value`` as a positive line count or raise."""

    if isinstance(value, bool):
        raise InvalidSplitValueError(f"Invalid line count: {value!r}")
    if isinstance(value, int):
        count = value
    else:
        try:
            count = int(str(value).strip())
        except ValueError as exc:
            raise InvalidSplitValueError(f"Invalid line count: {value!r}") from exc
    if count <= 0:
        raise InvalidSplitValueError(f"Invalid line count: {value!r}")
    return count


def split_by_lines(text: str, count: int) -> List[str]:
    """Split ``text`` into chunks of at most ``count`` lines.

    Lines are separated on ``"\\n"``; joining the chunks with ``"\\n"`` gives
    back ``text`` exactly.
    """

    if count <= 0:
        raise InvalidSplitValueError(f"Invalid line count: {count!r}")
    lines = text.split("\n")
    return ["\n".join(lines[index : index + count]) for index in range(0, len(lines), count)]


def split_by_delimiter(text: str, delimiter: str) -> List[str]:
    """Split on every occurrence of ``delimiter``, keeping empty fragments."""

    if not delimiter:
        raise InvalidSplitValueError("Delimiter must not be empty")
    return text.split(delimiter)


def split_text(text: str, mode: SplitMode | str, value: str | int) -> List[str]:
    mode = SplitMode(mode)
    if mode is SplitMode.LINES:
        return split_by_lines(text, parse_line_count(value))
    return split_by_delimiter(text, str(value))


class ChangeKind(str, Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"

    @property
    def marker(self) -> str:
        return _MARKERS[self]


_MARKERS = {
    ChangeKind.UNCHANGED: "  ",
    ChangeKind.ADDED: "+ ",
    ChangeKind.REMOVED: "- ",
}


@dataclass(frozen=True)
class DiffRun:
    """A contiguous run of lines sharing one classification."""

    kind: ChangeKind
    lines: tuple[str, ...]


def diff_lines(first: str, second: str) -> List[DiffRun]:
    """Classify the lines of ``first`` and ``second`` into runs.

    Matching uses :class:`difflib.SequenceMatcher` without the junk
    heuristic. A replaced block becomes a removed run followed by an added
    run. The marker is applied to every line of a run when rendered, not
    once per run, so unchanged output never carries a bare line.
    """

    old_lines = first.splitlines()
    new_lines = second.splitlines()
    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)

    runs: List[DiffRun] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            runs.append(DiffRun(ChangeKind.UNCHANGED, tuple(old_lines[i1:i2])))
            continue
        if tag in ("replace", "delete"):
            runs.append(DiffRun(ChangeKind.REMOVED, tuple(old_lines[i1:i2])))
        if tag in ("replace", "insert"):
            runs.append(DiffRun(ChangeKind.ADDED, tuple(new_lines[j1:j2])))
    return runs


def render_diff(runs: Iterable[DiffRun]) -> str:
    """Render runs as text, each line prefixed with its run's marker."""

    return "".join(
        f"{run.kind.marker}{line}\n" for run in runs for line in run.lines
    )


def format_text(text: str) -> str:
    """Trim every line and collapse consecutive blank lines into one."""

    formatted: List[str] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped == "" and formatted and formatted[-1] == "":
            continue
        formatted.append(stripped)
    return "\n".join(formatted)


__all__ = [
    "SplitMode",
    "parse_line_count",
    "split_by_lines",
    "split_by_delimiter",
    "split_text",
    "ChangeKind",
    "DiffRun",
    "diff_lines",
    "render_diff",
    "format_text",
]
