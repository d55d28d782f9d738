"""Utilities shared by docforge tools."""

from __future__ import annotations

import logging
import secrets
from pathlib import Path

from .settings import get_settings

UNIQUE_ID_BYTES = 9


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(get_settings().log_level)
        logger.propagate = False
    return logger


def resolve_path(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Path must not be None")
    resolved = Path(path).expanduser().resolve()
    return resolved


def generate_unique_id() -> str:
    """Return an 18 character hex token used to keep output filenames apart."""

    return secrets.token_hex(UNIQUE_ID_BYTES)


def ensure_output_dir(path: str | Path) -> Path:
    """Create ``path`` and any missing parents, returning the resolved directory.

    Calling this repeatedly for the same directory is a no-op; only genuine
    filesystem failures (permissions, a file in the way) raise.
    """

    directory = resolve_path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def build_output_filename(prefix: str, unique_id: str, extension: str, part: int | None = None) -> str:
    """Return ``<prefix>_<id>[_<part>]<extension>`` for an operation output."""

    stem = f"{prefix}_{unique_id}" if part is None else f"{prefix}_{unique_id}_{part}"
    return f"{stem}{extension}"


def ensure_output_parent(path: str | Path) -> Path:
    destination = resolve_path(path)
    ensure_output_dir(destination.parent)
    return destination


__all__ = [
    "get_logger",
    "resolve_path",
    "generate_unique_id",
    "ensure_output_dir",
    "ensure_output_parent",
    "build_output_filename",
]
