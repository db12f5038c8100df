"""Streaming package: SSE line translation and the chunk stream decoder."""

from .chat_completion_stream import ChatCompletionStream
from .sse import extract_streaming_text, strip_data_prefix

__all__ = ["ChatCompletionStream", "extract_streaming_text", "strip_data_prefix"]
