"""
Pydantic DTOs for streamed chat completion chunks.

Purpose
-------
Typed, OpenAI-compatible shape for the objects yielded by
:class:`~modelpilot.base.streaming.ChatCompletionStream`. Only the stream
decoder constructs them; ``to_dict`` produces the wire form where unset
delta members are omitted (so the terminal delta is ``{}``).
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..constants import CHUNK_OBJECT, STREAM_MODEL_NAME


FinishReason = Literal["stop", "length", "function_call", "tool_calls", "content_filter"]


class ChoiceDelta(BaseModel):
    """Partial message carried by one chunk."""

    role: Optional[str] = None
    content: Optional[str] = None


class ChunkChoice(BaseModel):
    """One choice entry of a chunk."""

    index: int = 0
    delta: ChoiceDelta = Field(default_factory=ChoiceDelta)
    finish_reason: Optional[FinishReason] = None


class ChatCompletionChunk(BaseModel):
    """Incremental unit of a streamed completion.

    Attributes:
        id: Stream identifier shared by every chunk of one stream.
        object: Always ``"chat.completion.chunk"``.
        created: Unix timestamp (seconds) stamped when the chunk is built.
        model: Model label for the routed stream.
        choices: Single-element list of :class:`ChunkChoice`.
    """

    id: str
    object: Literal["chat.completion.chunk"] = CHUNK_OBJECT
    created: int = Field(default_factory=lambda: int(time.time()))
    model: str = STREAM_MODEL_NAME
    choices: List[ChunkChoice]

    @property
    def content(self) -> Optional[str]:
        """Text delta of the first choice, if any."""
        return self.choices[0].delta.content if self.choices else None

    @property
    def finish_reason(self) -> Optional[str]:
        return self.choices[0].finish_reason if self.choices else None

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump()
        for choice in data["choices"]:
            choice["delta"] = {k: v for k, v in choice["delta"].items() if v is not None}
        return data


__all__ = ["ChatCompletionChunk", "ChunkChoice", "ChoiceDelta", "FinishReason"]
