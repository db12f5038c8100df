"""
FunctionDefinition and FunctionCall records.

A ``FunctionDefinition`` describes a callable the model may invoke (legacy
``functions`` parameter or the ``function`` member of a tool). A
``FunctionCall`` is the model's (or caller's) invocation with JSON-encoded
arguments.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ._serialize import drop_none


@dataclass(frozen=True)
class FunctionDefinition:
    """Function schema offered to the model.

    Attributes:
        name: Function name; required and non-empty.
        description: Optional human-readable description.
        parameters: Optional JSON-schema object describing the arguments.
    """

    name: str
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(asdict(self))


@dataclass(frozen=True)
class FunctionCall:
    """A function invocation; ``arguments`` is a JSON-encoded string."""

    name: str
    arguments: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "arguments": self.arguments}


__all__ = ["FunctionDefinition", "FunctionCall"]
