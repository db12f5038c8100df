"""Chat service package."""

from .completions import ChatCompletions
from .payload import OPTIONAL_PARAMS, build_payload

__all__ = ["ChatCompletions", "OPTIONAL_PARAMS", "build_payload"]
