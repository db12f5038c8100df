"""
Error classification helpers mapping HTTP outcomes to ``ModelPilotError``.

Implements status-to-code mapping, message/param extraction from server
error bodies, transport failure wrapping, and the retry eligibility rule.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from .error_code import ErrorCode
from .modelpilot_error import ModelPilotError


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.INVALID_REQUEST,
    401: ErrorCode.AUTHENTICATION,
    403: ErrorCode.PERMISSION_DENIED,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.INVALID_REQUEST,
    429: ErrorCode.RATE_LIMIT,
}

_DEFAULT_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.AUTHENTICATION: "Invalid API key",
    ErrorCode.RATE_LIMIT: "Rate limit exceeded",
    ErrorCode.INVALID_REQUEST: "Bad request",
}


def classify_status(status: int) -> ErrorCode:
    """Map an HTTP status code to an :class:`ErrorCode`."""
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.INTERNAL_SERVER
    return ErrorCode.API_ERROR


def _read_body(response: httpx.Response) -> Any:
    """Return the JSON body when decodable, otherwise the text (or ``None``)."""
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _message_from_body(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        if isinstance(body.get("message"), str) and body["message"]:
            return body["message"]
        err = body.get("error")
        if isinstance(err, dict) and isinstance(err.get("message"), str) and err["message"]:
            return err["message"]
        if isinstance(err, str) and err:
            return err
    return None


def _param_from_body(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and isinstance(err.get("param"), str):
            return err["param"]
    return None


def error_from_response(response: httpx.Response) -> ModelPilotError:
    """Build a :class:`ModelPilotError` from a non-success HTTP response.

    The response body must already be read (non-streaming responses are; the
    streaming path calls ``response.read()`` before classification).
    """
    status = response.status_code
    code = classify_status(status)
    body = _read_body(response)
    message = _message_from_body(body) or _DEFAULT_MESSAGES.get(code, "API error")
    return ModelPilotError(
        code=code,
        message=message,
        status=status,
        param=_param_from_body(body),
        body=body,
    )


# Raised before any bytes leave the client (bad scheme, malformed request).
_SETUP_ERRORS = (httpx.UnsupportedProtocol, httpx.LocalProtocolError)


def _is_network_failure(exc: BaseException | None) -> bool:
    return isinstance(exc, httpx.RequestError) and not isinstance(exc, _SETUP_ERRORS)


def error_from_exception(exc: Exception) -> ModelPilotError:
    """Wrap a failure that produced no HTTP response.

    ``httpx.RequestError`` subclasses (connect/read errors, timeouts) mean the
    request was sent but no response came back. Anything else, including
    ``httpx.UnsupportedProtocol`` and ``httpx.LocalProtocolError``, means the
    request could not be built or sent at all. Both map to ``TRANSPORT``.
    """
    if isinstance(exc, ModelPilotError):
        return exc
    if _is_network_failure(exc):
        message = f"Network error: No response received ({exc})"
    else:
        message = f"Request error: {exc}"
    return ModelPilotError(code=ErrorCode.TRANSPORT, message=message, raw=exc)


def is_retryable(error: ModelPilotError) -> bool:
    """Return True when the failure is transient.

    Transient means a 5xx response, or a network failure where the request
    was sent but no response arrived. Requests that could not be built or
    sent, authentication failures and every other status below 500
    (including 429) propagate without retry.
    """
    if error.code is ErrorCode.INTERNAL_SERVER:
        return True
    return error.code is ErrorCode.TRANSPORT and _is_network_failure(error.raw)


__all__ = [
    "classify_status",
    "error_from_response",
    "error_from_exception",
    "is_retryable",
    "_HTTP_STATUS_MAP",
]
