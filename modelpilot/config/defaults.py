"""modelpilot.config.defaults
==========================

Small, stable default values for the client. They can be overridden by an
external config file, environment variables or constructor arguments.

Only plain constants live here.
"""

from __future__ import annotations

# Base URL of the ModelPilot API (cloud functions deployment).
DEFAULT_BASE_URL = "https://your-firebase-project.cloudfunctions.net"
# Router used when none is configured.
DEFAULT_ROUTER_ID = "default"
# Per-request timeout in seconds.
DEFAULT_TIMEOUT_SECONDS = 30.0
# Additional attempts after the first on transient failures.
DEFAULT_MAX_RETRIES = 3

# Environment variables consulted by get_client_config.
ENV_PREFIX = "MODELPILOT"
CONFIG_FILE_ENV = "MODELPILOT_CONFIG_FILE"

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_ROUTER_ID",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_MAX_RETRIES",
    "ENV_PREFIX",
    "CONFIG_FILE_ENV",
]
