"""modelpilot package

Python client for the ModelPilot routing service with an OpenAI-compatible
chat completions interface.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`ModelPilot`
    - Errors: :class:`ModelPilotError`, :class:`ErrorCode`
    - Records: :class:`ChatRequest`, :class:`Message`,
      :class:`FunctionDefinition`, :class:`Tool`
    - Streaming: :class:`ChatCompletionStream`, :class:`ChatCompletionChunk`
"""

__version__ = "1.0.0"

from .base.errors import ErrorCode, ModelPilotError  # noqa: E402
from .base.models import (  # noqa: E402
    ChatRequest,
    FunctionCall,
    FunctionDefinition,
    Message,
    Tool,
    ToolCall,
)
from .base.dto import ChatCompletionChunk  # noqa: E402
from .base.streaming import ChatCompletionStream  # noqa: E402
from .client import ModelPilot  # noqa: E402

__all__ = [
    "__version__",
    "ModelPilot",
    "ModelPilotError",
    "ErrorCode",
    "ChatRequest",
    "FunctionCall",
    "FunctionDefinition",
    "Message",
    "Tool",
    "ToolCall",
    "ChatCompletionChunk",
    "ChatCompletionStream",
]
