"""
Validated, immutable client configuration.

Purpose
-------
``ClientConfig`` is the single configuration object shared (read-only) by the
facade, chat service and transport of one client instance. Validation runs
once at construction; failures raise ``pydantic.ValidationError`` (a
``ValueError``), so a bad API key never reaches the network.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..base.constants import API_KEY_PREFIX
from .defaults import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_ROUTER_ID,
    DEFAULT_TIMEOUT_SECONDS,
)


class ClientConfig(BaseModel):
    """Configuration for one ``ModelPilot`` client.

    Attributes:
        api_key: Key starting with ``mp_``.
        base_url: API root; a trailing slash is removed.
        router_id: Router addressed by chat and router-config calls.
        timeout: Request timeout in seconds (> 0).
        max_retries: Retries after the first attempt (>= 0).
        default_headers: Headers sent with every request.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    router_id: str = Field(default=DEFAULT_ROUTER_ID, min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    default_headers: Dict[str, str] = Field(default_factory=dict)

    @field_validator("api_key", mode="before")
    @classmethod
    def _check_api_key(cls, value: object) -> str:
        if value is None or value == "":
            raise ValueError("ModelPilot API key is required. Get one at https://modelpilot.co")
        if not isinstance(value, str):
            raise ValueError("API key must be a string")
        if not value.startswith(API_KEY_PREFIX):
            raise ValueError(
                f'Invalid ModelPilot API key format. API key must start with "{API_KEY_PREFIX}". '
                "Get your API key from https://modelpilot.co"
            )
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


__all__ = ["ClientConfig"]
