"""Authenticated HTTP transport with retry and error classification.

Summary:
- Builds headers once per request with :func:`build_headers`
- Runs every call (and the start phase of every stream) through the shared
  :func:`retry` policy
- Maps HTTP failures and network failures onto ``ModelPilotError`` kinds

Streaming calls return a :class:`ResponseByteStream` without buffering the
body; the chat service wraps it in the stream decoder.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Mapping, Optional

import httpx

from .constants import EVENT_STREAM_MEDIA_TYPE
from .errors import ErrorCode, ModelPilotError, error_from_exception, error_from_response
from .http import build_headers, get_httpx_client
from .logging import LogContext, get_logger, log_event
from .resilience.retry import RetryConfig, retry


class ResponseByteStream:
    """Iterable over the raw body of an open streaming response.

    The response is closed when iteration finishes, fails, or :meth:`close`
    is called. A network failure during iteration surfaces as a
    ``TRANSPORT`` ``ModelPilotError``.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def response(self) -> httpx.Response:
        return self._response

    def __iter__(self) -> Iterator[bytes]:
        try:
            yield from self._response.iter_bytes()
        except httpx.HTTPError as exc:
            raise error_from_exception(exc) from exc
        finally:
            self.close()

    def close(self) -> None:
        if not self._response.is_closed:
            self._response.close()


class Transport:
    """Executes API calls for one client configuration.

    Parameters:
        config: Client configuration (``api_key``, ``base_url``, ``timeout``,
            ``max_retries``, ``default_headers``).
        http_client: Optional ``httpx.Client`` to use instead of the shared
            pool (tests inject one backed by ``httpx.MockTransport``).
    """

    def __init__(self, config: Any, http_client: Optional[httpx.Client] = None) -> None:
        self._config = config
        self._http_client = http_client
        self._logger = get_logger("modelpilot.transport")
        self._retry_config = RetryConfig(
            max_retries=config.max_retries,
            attempt_logger=self._log_attempt,
        )

    @property
    def retry_config(self) -> RetryConfig:
        return self._retry_config

    def _client(self) -> httpx.Client:
        if self._http_client is not None:
            return self._http_client
        return get_httpx_client(self._config.base_url, self._config.timeout)

    def _url(self, endpoint: str) -> str:
        return f"{self._config.base_url}/{endpoint.lstrip('/')}"

    def _headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        merged: Dict[str, str] = dict(self._config.default_headers or {})
        if extra:
            merged.update(extra)
        return build_headers(self._config.api_key, merged)

    def _log_attempt(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: ModelPilotError | None,
    ) -> None:
        if error is None:
            log_event(self._logger, "request.attempt", attempt=attempt + 1, max_attempts=max_attempts, ok=True, level=logging.DEBUG)
            return
        if delay is not None and self._retry_config.retryable(error):
            log_event(
                self._logger,
                "request.retry",
                attempt=attempt + 1,
                max_attempts=max_attempts,
                delay_s=delay,
                error_code=error.code.value,
                status=error.status,
                level=logging.WARNING,
            )
            return
        log_event(
            self._logger,
            "request.attempt",
            attempt=attempt + 1,
            max_attempts=max_attempts,
            ok=False,
            error_code=error.code.value,
            status=error.status,
            level=logging.DEBUG,
        )

    # ---- non-streaming -----------------------------------------------------
    def request(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Execute a buffered call and return the decoded JSON body.

        Raises:
            ModelPilotError: classified HTTP or transport failure, after
                retries for transient kinds.
        """
        request_headers = self._headers(headers)
        ctx = LogContext(endpoint=endpoint, method=method)
        log_event(self._logger, "request.start", ctx, level=logging.DEBUG)

        @retry(self._retry_config)
        def _invoke() -> httpx.Response:
            try:
                response = self._client().request(
                    method,
                    self._url(endpoint),
                    json=payload,
                    params=params,
                    headers=request_headers,
                )
            except httpx.HTTPError as exc:
                raise error_from_exception(exc) from exc
            if not response.is_success:
                raise error_from_response(response)
            return response

        response = _invoke()
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ModelPilotError(
                code=ErrorCode.API_ERROR,
                message="Response body is not valid JSON",
                status=response.status_code,
                body=response.text,
                raw=exc,
            ) from exc

    # ---- streaming -----------------------------------------------------------
    def stream(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ResponseByteStream:
        """Open an event-stream response and return its unbuffered body.

        The connection and status check run under the retry policy. A
        failed start reads and closes the error response before raising.
        """
        stream_headers = {
            "Accept": EVENT_STREAM_MEDIA_TYPE,
            "Cache-Control": "no-cache",
        }
        if headers:
            stream_headers.update(headers)
        request_headers = self._headers(stream_headers)
        log_event(self._logger, "stream.start", LogContext(endpoint=endpoint, method=method), level=logging.DEBUG)

        @retry(self._retry_config)
        def _start() -> httpx.Response:
            client = self._client()
            try:
                request = client.build_request(method, self._url(endpoint), json=payload, headers=request_headers)
                response = client.send(request, stream=True)
            except httpx.HTTPError as exc:
                raise error_from_exception(exc) from exc
            if not response.is_success:
                try:
                    response.read()
                except httpx.HTTPError as exc:
                    raise error_from_exception(exc) from exc
                finally:
                    response.close()
                raise error_from_response(response)
            return response

        return ResponseByteStream(_start())


__all__ = ["Transport", "ResponseByteStream"]
