"""DTO package for response shapes produced by the client."""

from .chunk import ChatCompletionChunk, ChoiceDelta, ChunkChoice, FinishReason

__all__ = ["ChatCompletionChunk", "ChoiceDelta", "ChunkChoice", "FinishReason"]
