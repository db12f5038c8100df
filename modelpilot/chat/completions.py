"""Chat completions service.

Orchestrates validation, payload assembly and the transport call. The
non-streaming response is returned exactly as the routing service sent it;
streaming responses are wrapped in :class:`ChatCompletionStream`.

Errors are not caught here: validation failures surface before any network
call and transport failures reach the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ChatRequest
from ..base.models_parts._serialize import to_wire
from ..base.streaming import ChatCompletionStream
from ..base.transport import Transport
from ..base.validation import validate_chat_params
from .payload import build_payload


class ChatCompletions:
    """OpenAI-compatible ``chat.completions`` surface bound to one router.

    Parameters:
        transport: Transport executing the calls.
        router_id: Router addressed by every request.
    """

    def __init__(self, transport: Transport, router_id: str) -> None:
        self._transport = transport
        self._router_id = router_id
        self._logger = get_logger("modelpilot.chat")

    @property
    def endpoint(self) -> str:
        return f"/router/{self._router_id}"

    @property
    def completions(self) -> "ChatCompletions":
        """Alias so ``client.chat.completions.create`` works as with OpenAI."""
        return self

    def create(
        self,
        request: Optional[ChatRequest] = None,
        **params: Any,
    ) -> Union[Dict[str, Any], ChatCompletionStream]:
        """Create a chat completion.

        Parameters:
            request: A :class:`ChatRequest` record. Keyword ``params``
                (``messages=...``, ``temperature=...``) are used instead when
                no record is given, and override record fields otherwise.

        Returns:
            The parsed JSON response for non-streaming calls, or a
            :class:`ChatCompletionStream` when ``stream`` is true. The HTTP
            response stays open until the stream is exhausted or closed, so
            use it as a context manager when iteration may stop early::

                with client.chat.completions.create(messages=..., stream=True) as stream:
                    for chunk in stream:
                        ...

        Raises:
            ModelPilotError: ``INVALID_REQUEST`` from local validation (no
                request is sent), or any transport/HTTP error kind.
        """
        merged: Dict[str, Any] = request.to_dict() if request is not None else {}
        merged.update({k: to_wire(v) for k, v in params.items()})

        validate_chat_params(merged)
        payload = build_payload(merged, self._router_id)

        log_event(
            self._logger,
            "chat.start",
            LogContext(router_id=self._router_id, endpoint=self.endpoint, model=payload.get("model")),
            level=logging.DEBUG,
            stream=bool(payload.get("stream")),
            messages=len(payload["messages"]),
            has_tools=bool(payload.get("tools") or payload.get("functions")),
        )

        if payload.get("stream"):
            return self._create_streaming(payload)
        return self._transport.request("POST", self.endpoint, payload)

    def _create_streaming(self, payload: Dict[str, Any]) -> ChatCompletionStream:
        payload["stream"] = True
        body = self._transport.stream("POST", self.endpoint, payload)
        return ChatCompletionStream(body)


__all__ = ["ChatCompletions"]
