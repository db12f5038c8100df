"""
Chat request parameter validation.

Pure functions that check the shape and ranges of chat completion
parameters given as plain mappings (records are converted with
``ChatRequest.to_dict()`` first). Each check raises a
``ModelPilotError`` with code ``INVALID_REQUEST`` whose ``param`` names the
offending field; the message carries the index path. Messages are checked
before every other field.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Mapping

from .constants import VALID_ROLES
from .errors import invalid_request


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_messages(messages: Any) -> None:
    """Validate the ``messages`` parameter."""
    if messages is None:
        raise invalid_request("messages is required", "messages")
    if not _is_sequence(messages):
        raise invalid_request("messages must be an array", "messages")
    if len(messages) == 0:
        raise invalid_request("messages array cannot be empty", "messages")

    for index, message in enumerate(messages):
        if not isinstance(message, Mapping):
            raise invalid_request(f"messages[{index}] must be an object", "messages")
        role = message.get("role")
        if not role:
            raise invalid_request(f"messages[{index}].role is required", "role")
        if role not in VALID_ROLES:
            raise invalid_request(
                f"messages[{index}].role must be one of: {', '.join(VALID_ROLES)}",
                "role",
            )
        if not message.get("content") and not message.get("function_call") and not message.get("tool_calls"):
            raise invalid_request(
                f"messages[{index}].content is required unless function_call or tool_calls is present",
                "content",
            )


def _validate_function_definition(func: Any, path: str, param: str) -> None:
    if not isinstance(func, Mapping):
        raise invalid_request(f"{path} must be an object", param)
    name = func.get("name")
    if not name or not isinstance(name, str):
        raise invalid_request(f"{path}.name is required and must be a string", "name")
    description = func.get("description")
    if description is not None and not isinstance(description, str):
        raise invalid_request(f"{path}.description must be a string", "description")
    parameters = func.get("parameters")
    if parameters is not None and not isinstance(parameters, Mapping):
        raise invalid_request(f"{path}.parameters must be an object", "parameters")


def validate_functions(functions: Any) -> None:
    """Validate legacy ``functions`` definitions."""
    if not _is_sequence(functions):
        raise invalid_request("functions must be an array", "functions")
    for index, func in enumerate(functions):
        _validate_function_definition(func, f"functions[{index}]", "functions")


def validate_tools(tools: Any) -> None:
    """Validate ``tools``; function tools must carry a valid definition."""
    if not _is_sequence(tools):
        raise invalid_request("tools must be an array", "tools")
    for index, tool in enumerate(tools):
        if not isinstance(tool, Mapping):
            raise invalid_request(f"tools[{index}] must be an object", "tools")
        if not tool.get("type"):
            raise invalid_request(f"tools[{index}].type is required", "type")
        if tool["type"] == "function":
            if not tool.get("function"):
                raise invalid_request(
                    f"tools[{index}].function is required when type is 'function'",
                    "function",
                )
            _validate_function_definition(tool["function"], f"tools[{index}].function", "function")


def validate_sampling(params: Mapping[str, Any]) -> None:
    """Validate ``max_tokens``, ``temperature`` and ``top_p`` when present."""
    max_tokens = params.get("max_tokens")
    if max_tokens is not None and (not _is_number(max_tokens) or not max_tokens > 0):
        raise invalid_request("max_tokens must be a positive number", "max_tokens")

    temperature = params.get("temperature")
    if temperature is not None and (not _is_number(temperature) or not 0 <= temperature <= 2):
        raise invalid_request("temperature must be between 0 and 2", "temperature")

    top_p = params.get("top_p")
    if top_p is not None and (not _is_number(top_p) or not 0 < top_p <= 1):
        raise invalid_request("top_p must be between 0 (exclusive) and 1", "top_p")


def validate_chat_params(params: Mapping[str, Any]) -> None:
    """Run every chat parameter check; return normally when valid."""
    validate_messages(params.get("messages"))
    if params.get("functions") is not None:
        validate_functions(params["functions"])
    if params.get("tools") is not None:
        validate_tools(params["tools"])
    validate_sampling(params)


__all__ = [
    "validate_chat_params",
    "validate_functions",
    "validate_messages",
    "validate_sampling",
    "validate_tools",
]
