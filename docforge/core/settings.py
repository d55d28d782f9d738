"""Environment driven configuration for docforge."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_CONVERT_TIMEOUT = 120


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Process wide settings read from ``DOCFORGE_*`` environment variables."""

    log_level: str = "INFO"
    soffice_path: str | None = None
    convert_timeout: int = DEFAULT_CONVERT_TIMEOUT
    text_encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("DOCFORGE_LOG_LEVEL", "INFO").upper(),
            soffice_path=os.getenv("DOCFORGE_SOFFICE") or None,
            convert_timeout=_env_int("DOCFORGE_CONVERT_TIMEOUT", DEFAULT_CONVERT_TIMEOUT),
            text_encoding=os.getenv("DOCFORGE_TEXT_ENCODING", "utf-8"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


__all__ = ["Settings", "get_settings", "DEFAULT_CONVERT_TIMEOUT"]
