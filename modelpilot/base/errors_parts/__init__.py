"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `modelpilot.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .modelpilot_error import ModelPilotError
from .classification import (
    classify_status,
    error_from_exception,
    error_from_response,
    is_retryable,
)

__all__ = [
    "ErrorCode",
    "ModelPilotError",
    "classify_status",
    "error_from_exception",
    "error_from_response",
    "is_retryable",
]
