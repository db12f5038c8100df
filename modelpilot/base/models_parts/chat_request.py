"""
ChatRequest record for chat completion calls.

The record mirrors the keyword parameters accepted by
``ChatCompletions.create``; the router identifier is injected by the client
and is not a field here.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Sequence, Union

from ._serialize import drop_none
from .function_definition import FunctionDefinition
from .message import Message
from .tool import Tool


@dataclass(frozen=True)
class ChatRequest:
    """Chat completion request.

    Attributes:
        messages: Ordered, non-empty conversation.
        model: Optional model override; the router picks one when omitted.
        max_tokens: Completion token cap (> 0).
        temperature: Sampling temperature in [0, 2].
        top_p: Nucleus sampling mass in (0, 1].
        frequency_penalty: Passed through unchanged.
        presence_penalty: Passed through unchanged.
        stop: Stop sequence or sequences.
        functions: Legacy function definitions.
        function_call: Legacy function selection (``"auto"``, ``"none"`` or
            ``{"name": ...}``).
        tools: Tool definitions.
        tool_choice: Tool selection.
        response_format: e.g. ``{"type": "json_object"}``.
        user: End-user identifier.
        stream: Request a server-sent event stream.
    """

    messages: Sequence[Union[Message, Dict[str, Any]]]
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    stop: Optional[Union[str, List[str]]] = None
    functions: Optional[Sequence[Union[FunctionDefinition, Dict[str, Any]]]] = None
    function_call: Optional[Union[str, Dict[str, Any]]] = None
    tools: Optional[Sequence[Union[Tool, Dict[str, Any]]]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    response_format: Optional[Dict[str, Any]] = None
    user: Optional[str] = None
    stream: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the request as wire-shaped parameters, omitting ``None``."""
        return drop_none({f.name: getattr(self, f.name) for f in fields(self)})


__all__ = ["ChatRequest"]
