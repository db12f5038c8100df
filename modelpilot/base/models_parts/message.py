"""
Message record used in chat requests.

Defines the `Message` dataclass and the `Role` literal. ``content`` may be
omitted only when the message carries ``function_call`` or ``tool_calls``;
that rule is enforced by :mod:`modelpilot.base.validation` so that records
and plain mappings are checked identically.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional

from ._serialize import drop_none
from .function_definition import FunctionCall
from .tool import ToolCall


Role = Literal["system", "user", "assistant", "function", "tool"]


@dataclass(frozen=True)
class Message:
    """A chat message.

    Attributes:
        role: Author role.
        content: Message text.
        name: Optional author/function name (``function`` role messages).
        function_call: Legacy function invocation by the assistant.
        tool_calls: Tool invocations by the assistant.
        tool_call_id: Id of the tool call a ``tool`` message answers.
    """

    role: Role
    content: Optional[str] = None
    name: Optional[str] = None
    function_call: Optional[FunctionCall] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "role": self.role,
                "content": self.content,
                "name": self.name,
                "function_call": self.function_call,
                "tool_calls": self.tool_calls,
                "tool_call_id": self.tool_call_id,
            }
        )


__all__ = ["Message", "Role"]
