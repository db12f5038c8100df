"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``modelpilot.base.errors_parts`` to keep a stable import path.
"""

from __future__ import annotations

from .errors_parts.error_code import ErrorCode
from .errors_parts.modelpilot_error import ModelPilotError
from .errors_parts.classification import (
    classify_status,
    error_from_exception,
    error_from_response,
    is_retryable,
)


def invalid_request(message: str, param: str | None = None) -> ModelPilotError:
    """Return an ``INVALID_REQUEST`` error raised by local validation."""
    return ModelPilotError(code=ErrorCode.INVALID_REQUEST, message=message, param=param)


__all__ = [
    "ErrorCode",
    "ModelPilotError",
    "classify_status",
    "error_from_exception",
    "error_from_response",
    "invalid_request",
    "is_retryable",
]
