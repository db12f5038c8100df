"""
Request data model public surface.

Re-exports the records under ``modelpilot.base.models_parts``.
"""

from .models_parts.chat_request import ChatRequest
from .models_parts.function_definition import FunctionCall, FunctionDefinition
from .models_parts.message import Message, Role
from .models_parts.tool import Tool, ToolCall

__all__ = [
    "ChatRequest",
    "FunctionCall",
    "FunctionDefinition",
    "Message",
    "Role",
    "Tool",
    "ToolCall",
]
