"""Stream decoder tests.

Sources are plain lists or generators of byte buffers, so the decoder is
exercised without any HTTP layer; the last test drives it through a mock
transport end to end.
"""
from __future__ import annotations

import json
from typing import Iterator, List

import httpx
import pytest

from modelpilot import ChatCompletionChunk, ChatCompletionStream, ErrorCode, ModelPilotError

BODY = (
    b'data: {"choices":[{"delta":{"content":"Hello"}}]}\n\n'
    b'data: {"choices":[{"delta":{"content":" world"}}]}\n\n'
    b"data: [DONE]\n\n"
)


class ClosingSource:
    """Byte source recording how far it was consumed and whether it was closed."""

    def __init__(self, buffers: List[bytes]) -> None:
        self.buffers = buffers
        self.pulled = 0
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        for buffer in self.buffers:
            self.pulled += 1
            yield buffer

    def close(self) -> None:
        self.closed = True


def _split(data: bytes, size: int) -> List[bytes]:
    return [data[i : i + size] for i in range(0, len(data), size)]


def test_basic_stream_yields_content_then_terminal_chunk():
    chunks = list(ChatCompletionStream([BODY]))
    assert len(chunks) == 3
    assert [c.content for c in chunks] == ["Hello", " world", None]
    assert all(isinstance(c, ChatCompletionChunk) for c in chunks)

    first = chunks[0].to_dict()
    assert first["object"] == "chat.completion.chunk"
    assert first["model"] == "modelpilot-routed"
    assert first["id"].startswith("chatcmpl-")
    assert first["choices"] == [{"index": 0, "delta": {"content": "Hello"}, "finish_reason": None}]

    terminal = chunks[-1].to_dict()
    assert terminal["choices"] == [{"index": 0, "delta": {}, "finish_reason": "stop"}]


def test_all_chunks_share_one_id():
    stream = ChatCompletionStream([BODY])
    ids = {c.id for c in stream}
    assert ids == {stream.id}


def test_get_text():
    assert ChatCompletionStream([BODY]).get_text() == "Hello world"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 16, 50])
def test_arbitrary_buffer_boundaries(size):
    assert ChatCompletionStream(_split(BODY, size)).get_text() == "Hello world"


def test_multibyte_character_split_across_buffers():
    data = 'data: {"choices":[{"delta":{"content":"héllo 🌍"}}]}\n'.encode("utf-8")
    cut = data.index("🌍".encode("utf-8")) + 2
    assert ChatCompletionStream([data[:cut], data[cut:]]).get_text() == "héllo 🌍"


def test_text_buffers_are_accepted():
    assert ChatCompletionStream([BODY.decode("utf-8")]).get_text() == "Hello world"


def test_crlf_line_endings():
    body = BODY.replace(b"\n", b"\r\n")
    assert ChatCompletionStream([body]).get_text() == "Hello world"


def test_malformed_line_is_skipped():
    body = (
        b'data: {"choices":[{"delta":{"content":"a"}}]}\n'
        b"data: {broken\n"
        b'data: {"choices":[{"delta":{"content":"b"}}]}\n'
    )
    chunks = ChatCompletionStream([body]).to_list()
    assert [c.content for c in chunks] == ["a", "b", None]


def test_final_line_without_newline_is_processed():
    body = b'data: {"choices":[{"delta":{"content":"tail"}}]}'
    assert [c.content for c in ChatCompletionStream([body])] == ["tail", None]


def test_empty_source_yields_only_terminal_chunk():
    chunks = ChatCompletionStream([]).to_list()
    assert len(chunks) == 1
    assert chunks[0].finish_reason == "stop"


def test_chunks_are_produced_lazily():
    source = ClosingSource(_split(BODY, 10))
    stream = ChatCompletionStream(source)
    assert source.pulled == 0
    assert next(stream).content == "Hello"
    assert source.pulled < len(source.buffers)


def test_exhaustion_releases_source():
    source = ClosingSource([BODY])
    list(ChatCompletionStream(source))
    assert source.closed


def test_close_mid_stream_releases_source_and_stops():
    source = ClosingSource(_split(BODY, 5))
    stream = ChatCompletionStream(source)
    next(stream)
    stream.close()
    assert source.closed
    assert list(stream) == []


def test_close_before_iteration():
    source = ClosingSource([BODY])
    stream = ChatCompletionStream(source)
    stream.close()
    assert source.closed
    assert source.pulled == 0
    assert list(stream) == []


def test_context_manager_closes():
    source = ClosingSource([BODY])
    with ChatCompletionStream(source) as stream:
        next(stream)
    assert source.closed


def test_stream_is_single_pass():
    stream = ChatCompletionStream([BODY])
    assert len(list(stream)) == 3
    assert list(stream) == []


def test_source_failure_propagates_after_delivered_chunks():
    def failing() -> Iterator[bytes]:
        yield b'data: {"choices":[{"delta":{"content":"partial"}}]}\n'
        raise ModelPilotError(code=ErrorCode.TRANSPORT, message="Network error: connection reset")

    stream = ChatCompletionStream(failing())
    assert next(stream).content == "partial"
    with pytest.raises(ModelPilotError) as ei:
        next(stream)
    assert ei.value.code is ErrorCode.TRANSPORT


def test_end_to_end_over_http_failure(make_client, sleeps):
    def body() -> Iterator[bytes]:
        yield b'data: {"choices":[{"delta":{"content":"Hi"}}]}\n\n'
        raise httpx.ReadError("connection reset")

    client, _ = make_client(lambda request: httpx.Response(200, content=body()))
    stream = client.chat.completions.create(messages=[{"role": "user", "content": "x"}], stream=True)
    assert next(stream).content == "Hi"
    with pytest.raises(ModelPilotError) as ei:
        list(stream)
    assert ei.value.code is ErrorCode.TRANSPORT


def test_chunk_json_roundtrip_shape():
    chunk = next(ChatCompletionStream([BODY]))
    data = json.loads(chunk.model_dump_json())
    assert data["choices"][0]["delta"]["content"] == "Hello"
    assert isinstance(data["created"], int)


class TrackingBody(httpx.SyncByteStream):
    """Response body that records whether the response released it."""

    def __init__(self, buffers: List[bytes]) -> None:
        self.buffers = buffers
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        yield from self.buffers

    def close(self) -> None:
        self.closed = True


def test_with_block_closes_http_response_after_early_break(make_client, sleeps):
    body = TrackingBody(_split(BODY, 8))
    client, _ = make_client(lambda request: httpx.Response(200, stream=body))

    with client.chat.completions.create(messages=[{"role": "user", "content": "x"}], stream=True) as stream:
        for chunk in stream:
            assert chunk.content == "Hello"
            break
        assert not body.closed
    assert body.closed
