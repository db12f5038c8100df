"""Configuration layer for the client.

Merge order (later wins):
    1. Built-in defaults (``DEFAULTS``)
    2. Optional external config file (JSON or YAML) named by
       ``MODELPILOT_CONFIG_FILE``
    3. Environment variables (``MODELPILOT_API_KEY``, ``MODELPILOT_BASE_URL``,
       ``MODELPILOT_ROUTER_ID``, ``MODELPILOT_TIMEOUT``,
       ``MODELPILOT_MAX_RETRIES``)
    4. In-code overrides (constructor arguments); ``None`` means "not given"

External config file example::

    api_key: mp_live_123
    router_id: support-bot
    timeout: 60

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
* ClientConfig (validated, frozen)
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    CONFIG_FILE_ENV,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_ROUTER_ID,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_PREFIX,
)
from .settings import ClientConfig


DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "router_id": DEFAULT_ROUTER_ID,
    "timeout": DEFAULT_TIMEOUT_SECONDS,
    "max_retries": DEFAULT_MAX_RETRIES,
}

ENV_FIELD_MAP = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "router_id": "ROUTER_ID",
    "timeout": "TIMEOUT",
    "max_retries": "MAX_RETRIES",
}


def _load_external_config() -> Dict[str, Any]:
    """Load the file named by ``MODELPILOT_CONFIG_FILE`` (JSON first, then YAML)."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        return {}
    return {k: v for k, v in data.items() if k in ENV_FIELD_MAP or k == "default_headers"}


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{ENV_PREFIX}_{suffix}")
        if val:
            out[field] = val
    return out


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged (unvalidated) client settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = [
    "ClientConfig",
    "DEFAULTS",
    "get_client_config",
]
