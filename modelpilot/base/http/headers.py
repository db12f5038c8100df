"""Request header construction.

Headers are built by an explicit pure function invoked once per request by
the transport rather than by a hidden client hook.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from ..constants import API_KEY_PREFIX, CLIENT_LIBRARY, USER_AGENT


def build_headers(api_key: str, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return the headers for an authenticated API request.

    Parameters:
        api_key: ModelPilot API key; must start with ``mp_``.
        extra: Additional headers (configured defaults, per-call headers).
            They are applied last and may override the identification
            headers but never ``Authorization``.

    Raises:
        ValueError: When the key does not carry the required prefix.
    """
    if not isinstance(api_key, str) or not api_key.startswith(API_KEY_PREFIX):
        raise ValueError(f'Invalid ModelPilot API key format. API key must start with "{API_KEY_PREFIX}"')
    headers = {
        "User-Agent": USER_AGENT,
        "X-Client-Library": CLIENT_LIBRARY,
        "Content-Type": "application/json",
    }
    if extra:
        headers.update(extra)
    headers["Authorization"] = f"Bearer {api_key}"
    return headers


__all__ = ["build_headers"]
