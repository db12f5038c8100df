"""Wire payload assembly for chat completion calls."""
from __future__ import annotations

from typing import Any, Dict, Mapping

# Optional request fields forwarded when present (and not None).
OPTIONAL_PARAMS = (
    "model",
    "max_tokens",
    "temperature",
    "top_p",
    "frequency_penalty",
    "presence_penalty",
    "stop",
    "functions",
    "function_call",
    "tools",
    "tool_choice",
    "response_format",
    "user",
    "stream",
)


def build_payload(params: Mapping[str, Any], router_id: str) -> Dict[str, Any]:
    """Return the JSON body for ``POST /router/{router_id}``.

    ``messages`` and ``routerId`` are always present; optional fields are
    copied unchanged only when given so wire requests stay minimal.
    """
    payload: Dict[str, Any] = {
        "messages": params["messages"],
        "routerId": router_id,
    }
    for name in OPTIONAL_PARAMS:
        value = params.get(name)
        if value is not None:
            payload[name] = value
    return payload


__all__ = ["OPTIONAL_PARAMS", "build_payload"]
