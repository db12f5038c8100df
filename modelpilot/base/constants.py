"""Base shared constants for the client.

Central location to avoid scattering magic strings across modules.

# pragma: allowlist secret
"""
from __future__ import annotations

from .. import __version__

# Required API key prefix
API_KEY_PREFIX = "mp_"  # pragma: allowlist secret - prefix pattern, not a secret

# Client identification headers
CLIENT_LIBRARY = "modelpilot-python"
USER_AGENT = f"{CLIENT_LIBRARY}/{__version__}"

# Server-sent events
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"
SSE_DATA_PREFIX = "data:"
SSE_DONE_SENTINEL = "[DONE]"

# Chunk shape emitted by the stream decoder
CHUNK_OBJECT = "chat.completion.chunk"
STREAM_MODEL_NAME = "modelpilot-routed"

VALID_ROLES = ("system", "user", "assistant", "function", "tool")

__all__ = [
    "API_KEY_PREFIX",
    "CLIENT_LIBRARY",
    "USER_AGENT",
    "EVENT_STREAM_MEDIA_TYPE",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "CHUNK_OBJECT",
    "STREAM_MODEL_NAME",
    "VALID_ROLES",
]
