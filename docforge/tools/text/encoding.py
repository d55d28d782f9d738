"""Character encoding detection and transcoding."""

from __future__ import annotations

import codecs

import chardet

from ...core.exceptions import UnsupportedEncodingError
from ...core.utils import get_logger

LOGGER = get_logger("docforge.text.encoding")

AUTO_ENCODING = "auto"
DETECTION_SAMPLE_BYTES = 10240
MIN_CONFIDENCE = 0.7


def normalize_encoding(name: str) -> str:
    """Return Python's canonical codec name for ``name``."""

    try:
        return codecs.lookup(name.strip()).name
    except LookupError as exc:
        raise UnsupportedEncodingError(name) from exc


def detect_encoding(raw: bytes, *, fallback: str = "utf-8") -> str:
    if not raw:
        return fallback

    detected = chardet.detect(raw[:DETECTION_SAMPLE_BYTES])
    encoding = detected.get("encoding")
    confidence = detected.get("confidence") or 0.0
    LOGGER.debug("Detected encoding %s (confidence %.2f)", encoding, confidence)

    if not encoding or confidence < MIN_CONFIDENCE:
        LOGGER.warning("Low confidence encoding detection (%.2f); using %s", confidence, fallback)
        return fallback
    return normalize_encoding(encoding)


def transcode(raw: bytes, from_encoding: str, to_encoding: str) -> bytes:
    """Decode ``raw`` with ``from_encoding`` and re-encode it.

    ``from_encoding`` may be ``"auto"`` to detect the source encoding.
    Undecodable or unencodable characters raise :class:`UnicodeError`.
    """

    if from_encoding.strip().lower() == AUTO_ENCODING:
        source = detect_encoding(raw)
    else:
        source = normalize_encoding(from_encoding)
    target = normalize_encoding(to_encoding)
    LOGGER.debug("Transcoding %d bytes from %s to %s", len(raw), source, target)
    return raw.decode(source).encode(target)


__all__ = ["AUTO_ENCODING", "normalize_encoding", "detect_encoding", "transcode"]
