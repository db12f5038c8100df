"""ModelPilot client facade.

Holds the immutable configuration of one client instance and exposes the
chat completions service plus the router-config and model-list calls. The
configuration is safe to share across threads; every call builds its own
request state.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from .base.transport import Transport
from .chat import ChatCompletions
from .config import ClientConfig, get_client_config


class ModelPilot:
    """Client for the ModelPilot routing service.

    Parameters:
        api_key: API key starting with ``mp_``; falls back to
            ``MODELPILOT_API_KEY``.
        base_url: API root URL.
        router_id: Router to address (default ``"default"``).
        timeout: Request timeout in seconds (default 30).
        max_retries: Retries after the first attempt for transient failures
            (default 3).
        default_headers: Extra headers sent with every request.
        http_client: Optional ``httpx.Client`` to use instead of the shared
            connection pool. It is never closed by the client.

    Raises:
        ValueError: When the API key is missing or malformed, or another
            setting is out of range.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        router_id: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        settings = get_client_config(
            {
                "api_key": api_key,
                "base_url": base_url,
                "router_id": router_id,
                "timeout": timeout,
                "max_retries": max_retries,
                "default_headers": dict(default_headers) if default_headers else None,
            }
        )
        settings.setdefault("api_key", None)
        self._config = ClientConfig(**settings)
        self._transport = Transport(self._config, http_client=http_client)
        self.chat = ChatCompletions(self._transport, self._config.router_id)

    # ---- configuration (read-only) -----------------------------------------
    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def router_id(self) -> str:
        return self._config.router_id

    @property
    def timeout(self) -> float:
        return self._config.timeout

    @property
    def max_retries(self) -> int:
        return self._config.max_retries

    # ---- calls ---------------------------------------------------------------
    def request(
        self,
        endpoint: str,
        method: str = "POST",
        payload: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Make an authenticated call with the shared retry policy."""
        return self._transport.request(method, endpoint, payload, params=params, headers=headers)

    def get_router_config(self) -> Dict[str, Any]:
        """Return the configuration of the configured router."""
        return self.request(f"/getRouterConfig/{self.router_id}", method="GET")

    def get_models(self) -> Any:
        """Return the models available through the service."""
        return self.request("/getModels", method="GET")

    def __repr__(self) -> str:
        return f"ModelPilot(base_url={self.base_url!r}, router_id={self.router_id!r})"


__all__ = ["ModelPilot"]
