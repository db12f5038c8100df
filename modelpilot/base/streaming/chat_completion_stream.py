"""Incremental decoder turning a byte stream into completion chunks.

The stream consumes any iterable of byte (or text) buffers, such as the
body of an ``httpx`` streaming response, and yields
:class:`~modelpilot.base.dto.ChatCompletionChunk` objects. Network buffers do
not align with SSE lines, so a text buffer carries the trailing partial line
between pulls; UTF-8 is decoded incrementally so multi-byte characters split
across buffers are preserved.

Lifecycle:
    - Single pass: the stream is its own iterator.
    - ``close()`` (or leaving a ``with`` block, or closing the iterator
      early) releases the source, which for HTTP streams closes the
      connection.
    - Source failures propagate to the consumer at the point of iteration.
"""
from __future__ import annotations

import codecs
import uuid
from typing import Any, Iterable, Iterator, List, Optional, Union

from ..constants import STREAM_MODEL_NAME
from ..dto import ChatCompletionChunk, ChoiceDelta, ChunkChoice
from .sse import extract_streaming_text

Buffer = Union[bytes, bytearray, str]


class ChatCompletionStream:
    """Lazy, non-restartable sequence of chat completion chunks.

    Parameters:
        source: Iterable of ``bytes``/``str`` buffers. If it exposes
            ``close()`` it is called when the stream is released.
        model: Model label stamped on each chunk.
    """

    def __init__(self, source: Iterable[Buffer], *, model: str = STREAM_MODEL_NAME) -> None:
        self._source = source
        self._model = model
        self._id = f"chatcmpl-{uuid.uuid4().hex}"
        self._buffer = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._iterator: Optional[Iterator[ChatCompletionChunk]] = None
        self._closed = False

    @property
    def id(self) -> str:
        return self._id

    # ---- iteration -------------------------------------------------------
    def __iter__(self) -> "ChatCompletionStream":
        return self

    def __next__(self) -> ChatCompletionChunk:
        if self._iterator is None:
            if self._closed:
                raise StopIteration
            self._iterator = self._chunks()
        return next(self._iterator)

    def _chunks(self) -> Iterator[ChatCompletionChunk]:
        try:
            for buffer in self._source:
                self._buffer += self._decode(buffer)
                *lines, self._buffer = self._buffer.split("\n")
                for line in lines:
                    chunk = self._chunk_from_line(line)
                    if chunk is not None:
                        yield chunk

            self._buffer += self._decoder.decode(b"", final=True)
            if self._buffer.strip():
                chunk = self._chunk_from_line(self._buffer)
                self._buffer = ""
                if chunk is not None:
                    yield chunk

            yield self._build_chunk(ChoiceDelta(), finish_reason="stop")
        finally:
            self._release()

    def _decode(self, buffer: Buffer) -> str:
        if isinstance(buffer, str):
            return buffer
        return self._decoder.decode(bytes(buffer))

    def _chunk_from_line(self, line: str) -> Optional[ChatCompletionChunk]:
        if not line.strip():
            return None
        text = extract_streaming_text(line)
        if text is None:
            return None
        return self._build_chunk(ChoiceDelta(content=text))

    def _build_chunk(self, delta: ChoiceDelta, finish_reason: Optional[str] = None) -> ChatCompletionChunk:
        return ChatCompletionChunk(
            id=self._id,
            model=self._model,
            choices=[ChunkChoice(index=0, delta=delta, finish_reason=finish_reason)],
        )

    # ---- resource handling -----------------------------------------------
    def _release(self) -> None:
        if self._closed:
            return
        self._closed = True
        close = getattr(self._source, "close", None)
        if callable(close):
            close()

    def close(self) -> None:
        """Stop consumption and release the underlying source."""
        if self._iterator is not None:
            self._iterator.close()
        self._release()

    def __enter__(self) -> "ChatCompletionStream":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ---- reductions ------------------------------------------------------
    def to_list(self) -> List[ChatCompletionChunk]:
        """Drain the stream into a list of chunks."""
        return list(self)

    def get_text(self) -> str:
        """Drain the stream and concatenate every content fragment."""
        return "".join(chunk.content or "" for chunk in self)


__all__ = ["ChatCompletionStream"]
