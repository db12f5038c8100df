"""Base layer: errors, logging, HTTP, retry, records, streaming, transport."""

from .errors import ErrorCode, ModelPilotError
from .models import ChatRequest, FunctionCall, FunctionDefinition, Message, Tool, ToolCall
from .dto import ChatCompletionChunk
from .streaming import ChatCompletionStream
from .transport import Transport

__all__ = [
    "ErrorCode",
    "ModelPilotError",
    "ChatRequest",
    "FunctionCall",
    "FunctionDefinition",
    "Message",
    "Tool",
    "ToolCall",
    "ChatCompletionChunk",
    "ChatCompletionStream",
    "Transport",
]
