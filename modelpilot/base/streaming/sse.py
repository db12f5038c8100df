"""Server-sent event line translation.

Purpose:
- Turn one complete SSE line from the routing service into the text delta
  it carries, if any.

Notes:
- Pure and non-throwing: blank lines, the ``[DONE]`` sentinel, payloads
  without content and malformed JSON all yield ``None``. Malformed JSON is
  reported through a ``stream.decode_error`` debug event so a bad line never
  aborts the stream.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL
from ..logging import get_logger, log_event

_logger = get_logger("modelpilot.stream")


def strip_data_prefix(line: str) -> str:
    """Remove a leading ``data:`` field name (and one following space)."""
    if line.startswith(SSE_DATA_PREFIX):
        line = line[len(SSE_DATA_PREFIX):]
        if line.startswith(" "):
            line = line[1:]
    return line


def _content_of(data: Any) -> Optional[str]:
    """Return ``choices[0].delta.content`` else ``choices[0].message.content``."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    choice = choices[0]
    for key in ("delta", "message"):
        part = choice.get(key)
        if isinstance(part, dict):
            content = part.get("content")
            if isinstance(content, str) and content:
                return content
    return None


def extract_streaming_text(line: str) -> Optional[str]:
    """Translate one SSE line into its text delta.

    Parameters:
        line: A complete line (without the trailing newline).

    Returns:
        The content fragment, or ``None`` when the line carries none.
    """
    payload = strip_data_prefix(line)
    text = payload.strip()
    if not text or text == SSE_DONE_SENTINEL:
        return None
    try:
        data = json.loads(text)
    except ValueError:
        log_event(
            _logger,
            "stream.decode_error",
            level=logging.DEBUG,
            line=text[:200],
        )
        return None
    return _content_of(data)


__all__ = ["extract_streaming_text", "strip_data_prefix"]
