"""The success/error envelope returned by every docforge operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a single operation call.

    Exactly one of ``data`` and ``error`` is populated. Use :meth:`ok` and
    :meth:`fail` rather than the constructor so the invariant holds.
    """

    success: bool
    data: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("A successful result carries data and no error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("A failed result carries an error and no data")

    @classmethod
    def ok(cls, data: str) -> "OperationResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult":
        return cls(success=False, error=error or "Unknown error")

    @property
    def message(self) -> str:
        return self.data if self.success else self.error  # type: ignore[return-value]

    def to_response(self) -> dict[str, Any]:
        return {"success": self.success, "message": self.message}

    def __str__(self) -> str:
        if self.success:
            return f"OperationResult(success=True, data={self.data!r})"
        return f"OperationResult(success=False, error={self.error!r})"


__all__ = ["OperationResult"]
