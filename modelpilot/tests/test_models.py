"""Tests for request records and their wire form."""
from __future__ import annotations

import dataclasses

import pytest

from modelpilot import ChatRequest, FunctionCall, FunctionDefinition, Message, Tool, ToolCall


def test_message_to_dict_omits_unset_fields():
    assert Message(role="user", content="Hi").to_dict() == {"role": "user", "content": "Hi"}


def test_assistant_message_with_tool_calls():
    msg = Message(
        role="assistant",
        tool_calls=[ToolCall(id="call_1", function=FunctionCall(name="get_weather", arguments='{"city": "Paris"}'))],
    )
    assert msg.to_dict() == {
        "role": "assistant",
        "tool_calls": [
            {"id": "call_1", "type": "function", "function": {"name": "get_weather", "arguments": '{"city": "Paris"}'}}
        ],
    }


def test_function_definition_and_tool():
    fn = FunctionDefinition(name="calculate", description="Math")
    assert fn.to_dict() == {"name": "calculate", "description": "Math"}
    assert Tool(function=fn).to_dict() == {"type": "function", "function": {"name": "calculate", "description": "Math"}}


def test_chat_request_to_dict_mixes_records_and_mappings():
    request = ChatRequest(
        messages=[Message(role="user", content="Hi"), {"role": "assistant", "content": "Hello"}],
        functions=[FunctionDefinition(name="f")],
        function_call={"name": "f"},
        max_tokens=5,
    )
    assert request.to_dict() == {
        "messages": [{"role": "user", "content": "Hi"}, {"role": "assistant", "content": "Hello"}],
        "functions": [{"name": "f"}],
        "function_call": {"name": "f"},
        "max_tokens": 5,
    }


def test_records_are_frozen():
    msg = Message(role="user", content="Hi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.content = "changed"  # type: ignore[misc]
