"""
Structured client error exception type.

A single exception class tagged with an :class:`ErrorCode` replaces a deep
error class tree; callers match on ``error.code``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .error_code import ErrorCode


@dataclass
class ModelPilotError(Exception):
    """Represents a client failure with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message.
        status: HTTP status when the failure came from a server response.
        param: Offending request parameter, when known.
        body: Parsed (or raw text) response body for diagnostics.
        raw: Optional original exception (e.g. an ``httpx`` error).
    """

    code: ErrorCode
    message: str
    status: Optional[int] = None
    param: Optional[str] = None
    body: Any = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining code, status and message."""
        status = f" ({self.status})" if self.status is not None else ""
        return f"{self.code.value}{status}: {self.message}"

    def __reduce__(self):
        return (
            self.__class__,
            (self.code, self.message, self.status, self.param, self.body, self.raw),
        )


__all__ = ["ModelPilotError"]
