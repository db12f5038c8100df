"""Shared ``to_dict`` helper for the request records."""
from __future__ import annotations

from typing import Any, Dict


def to_wire(value: Any) -> Any:
    """Return ``value`` as JSON-ready data, recursing into records and lists."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    if isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items()}
    return value


def drop_none(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``fields`` without ``None`` values, serializing nested records."""
    return {k: to_wire(v) for k, v in fields.items() if v is not None}


__all__ = ["to_wire", "drop_none"]
