"""Chat completions service tests (validation, payload and dispatch)."""
from __future__ import annotations

import json

import httpx
import pytest

from modelpilot import ChatCompletionStream, ChatRequest, ErrorCode, FunctionDefinition, Message, ModelPilotError, Tool
from modelpilot.chat import build_payload

HELLO = [{"role": "user", "content": "Hello!"}]
COMPLETION = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "choices": [{"index": 0, "message": {"role": "assistant", "content": "Hi there"}, "finish_reason": "stop"}],
}


def _body(request: httpx.Request) -> dict:
    return json.loads(request.content)


def test_build_payload_is_minimal():
    payload = build_payload({"messages": HELLO, "temperature": None, "top_p": 0.5}, "router-1")
    assert payload == {"messages": HELLO, "routerId": "router-1", "top_p": 0.5}


def test_build_payload_forwards_every_optional_field():
    params = {
        "messages": HELLO,
        "model": "gpt-4o",
        "max_tokens": 10,
        "temperature": 0,
        "top_p": 1,
        "frequency_penalty": 0.1,
        "presence_penalty": -0.2,
        "stop": ["\n"],
        "functions": [{"name": "f"}],
        "function_call": "auto",
        "tools": [{"type": "function", "function": {"name": "t"}}],
        "tool_choice": "none",
        "response_format": {"type": "json_object"},
        "user": "u-1",
        "stream": False,
        "unknown": "dropped",
    }
    payload = build_payload(params, "r")
    assert payload.pop("routerId") == "r"
    params.pop("unknown")
    assert payload == params


def test_create_posts_to_router_endpoint(make_client, sleeps):
    client, handler = make_client(httpx.Response(200, json=COMPLETION), router_id="support")
    result = client.chat.completions.create(messages=HELLO, temperature=0.7, max_tokens=100)

    assert result == COMPLETION
    (req,) = handler.requests
    assert req.method == "POST"
    assert req.url.path == "/router/support"
    assert _body(req) == {"messages": HELLO, "routerId": "support", "temperature": 0.7, "max_tokens": 100}


def test_default_router_is_used(make_client, sleeps):
    client, handler = make_client(httpx.Response(200, json=COMPLETION))
    client.chat.create(messages=HELLO)
    assert handler.requests[0].url.path == "/router/default"
    assert _body(handler.requests[0])["routerId"] == "default"


def test_request_record_and_keyword_override(make_client, sleeps):
    client, handler = make_client(httpx.Response(200, json=COMPLETION))
    request = ChatRequest(
        messages=[Message(role="system", content="Be brief"), Message(role="user", content="Hi")],
        temperature=0.2,
        tools=[Tool(function=FunctionDefinition(name="lookup", parameters={"type": "object"}))],
    )
    client.chat.completions.create(request, temperature=1.0)
    body = _body(handler.requests[0])
    assert body["messages"] == [{"role": "system", "content": "Be brief"}, {"role": "user", "content": "Hi"}]
    assert body["temperature"] == 1.0
    assert body["tools"] == [{"type": "function", "function": {"name": "lookup", "parameters": {"type": "object"}}}]


@pytest.mark.parametrize(
    "params, param",
    [
        ({}, "messages"),
        ({"messages": []}, "messages"),
        ({"messages": "hi"}, "messages"),
        ({"messages": [{"role": "robot", "content": "x"}]}, "role"),
        ({"messages": HELLO, "temperature": 3}, "temperature"),
        ({"messages": HELLO, "tools": [{"function": {"name": "x"}}]}, "type"),
    ],
)
def test_invalid_input_never_reaches_network(make_client, sleeps, params, param):
    client, handler = make_client(httpx.Response(200, json=COMPLETION))
    with pytest.raises(ModelPilotError) as ei:
        client.chat.completions.create(**params)
    assert ei.value.code is ErrorCode.INVALID_REQUEST
    assert ei.value.param == param
    assert handler.requests == []


def test_server_errors_propagate_unchanged(make_client, sleeps):
    client, handler = make_client(httpx.Response(429, json={"error": {"message": "slow down"}}))
    with pytest.raises(ModelPilotError) as ei:
        client.chat.completions.create(messages=HELLO)
    assert ei.value.code is ErrorCode.RATE_LIMIT
    assert ei.value.message == "slow down"
    assert len(handler.requests) == 1


def _sse_response(request: httpx.Request) -> httpx.Response:
    events = [
        b'data: {"choices":[{"delta":{"content":"Hello"}}]}\n\n',
        b'data: {"choices":[{"delta":{"content":" world"}}]}\n\n',
        b"data: [DONE]\n\n",
    ]
    return httpx.Response(200, headers={"Content-Type": "text/event-stream"}, content=iter(events))


def test_streaming_returns_chunk_stream(make_client, sleeps):
    client, handler = make_client(_sse_response)
    stream = client.chat.completions.create(messages=HELLO, stream=True)

    assert isinstance(stream, ChatCompletionStream)
    req = handler.requests[0]
    assert req.headers["Accept"] == "text/event-stream"
    assert _body(req)["stream"] is True

    chunks = list(stream)
    assert [c.content for c in chunks] == ["Hello", " world", None]
    assert chunks[-1].finish_reason == "stop"
    assert len({c.id for c in chunks}) == 1


def test_streaming_start_failure_raises_before_iteration(make_client, sleeps):
    client, handler = make_client(httpx.Response(401, json={"message": "Invalid API key"}))
    with pytest.raises(ModelPilotError) as ei:
        client.chat.completions.create(messages=HELLO, stream=True)
    assert ei.value.code is ErrorCode.AUTHENTICATION


def test_chat_start_logged_without_message_content(make_client, sleeps, log_records):
    client, _ = make_client(httpx.Response(200, json=COMPLETION))
    client.chat.completions.create(messages=HELLO, model="gpt-4o")
    starts = [json.loads(r.getMessage()) for r in log_records if r.name == "modelpilot.chat"]
    assert starts and starts[0]["event"] == "chat.start"
    assert starts[0]["router_id"] == "default"
    assert starts[0]["model"] == "gpt-4o"
    assert starts[0]["messages"] == 1
    assert all("Hello!" not in r.getMessage() for r in log_records)
