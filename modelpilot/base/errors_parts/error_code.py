"""
Normalized ModelPilot error codes (taxonomy).

Defines the flat `ErrorCode` enumeration carried by every
:class:`~modelpilot.base.errors.ModelPilotError`. Values are lowercase
snake_case and are considered a stable public contract for logging and
callers that branch on ``error.code``.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error kinds surfaced by the client."""

    INVALID_REQUEST = "invalid_request"
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_SERVER = "internal_server"
    API_ERROR = "api_error"
    TRANSPORT = "transport"


__all__ = ["ErrorCode"]
