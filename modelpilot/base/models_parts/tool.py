"""
Tool and ToolCall records (modern function calling).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal

from .function_definition import FunctionCall, FunctionDefinition


@dataclass(frozen=True)
class Tool:
    """A tool offered to the model; only ``"function"`` tools exist today."""

    function: FunctionDefinition
    type: Literal["function"] = "function"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "function": self.function.to_dict()}


@dataclass(frozen=True)
class ToolCall:
    """A tool invocation carried on an assistant message."""

    id: str
    function: FunctionCall
    type: Literal["function"] = field(default="function")

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "type": self.type, "function": self.function.to_dict()}


__all__ = ["Tool", "ToolCall"]
