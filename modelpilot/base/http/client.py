"""Shared HTTP client pool.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so that client facades sharing a base URL and timeout reuse
    connections instead of allocating a new pool per instance.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, timeout)``.
    - All clients are closed at interpreter exit via ``atexit``. Libraries or
      tests may also call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Tuple

import httpx

from ..logging import get_logger

_CLIENTS: Dict[Tuple[str, float], httpx.Client] = {}
_LOCK = threading.RLock()
_logger = get_logger("modelpilot.http")


def get_httpx_client(base_url: str, timeout: float) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and timeout.

    Parameters:
        base_url: API base URL set on the client so callers can issue
            relative requests (``/router/default``).
        timeout: Request timeout in seconds applied to connect, read, write
            and pool acquisition.

    Returns:
        A reusable ``httpx.Client`` instance.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant
        lock.
    """
    key = (base_url, float(timeout))
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = httpx.Client(base_url=base_url, timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception as exc:  # nosec B110 - shutdown path
                _logger.debug("http client close failed: %s", exc)
        _CLIENTS.clear()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)

__all__ = ["get_httpx_client", "close_all_clients"]
