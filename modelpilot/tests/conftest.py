"""Pytest configuration for the modelpilot test suite.

Provides an isolated environment (no ``MODELPILOT_*`` variables leak in), a
no-op backoff sleep that records requested delays, an ``httpx.MockTransport``
client factory, and a capture handler on the ``modelpilot`` logger.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterator, List

import httpx
import pytest

from modelpilot import ModelPilot
from modelpilot.base.http import close_all_clients

TEST_API_KEY = "mp_test_key_123"  # pragma: allowlist secret - test fixture value
TEST_BASE_URL = "https://api.modelpilot.test"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove client environment variables for the duration of a test."""
    for name in (
        "MODELPILOT_API_KEY",
        "MODELPILOT_BASE_URL",
        "MODELPILOT_ROUTER_ID",
        "MODELPILOT_TIMEOUT",
        "MODELPILOT_MAX_RETRIES",
        "MODELPILOT_CONFIG_FILE",
        "MODELPILOT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    close_all_clients()


@pytest.fixture()
def sleeps(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Make backoff sleeps instant and record the requested delays."""
    delays: List[float] = []
    monkeypatch.setattr(time, "sleep", lambda seconds: delays.append(seconds))
    return delays


class RecordingHandler:
    """``httpx.MockTransport`` handler replaying queued responses."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        if callable(outcome):
            return outcome(request)
        return httpx.Response(outcome.status_code, headers=outcome.headers, content=outcome.content)


@pytest.fixture()
def make_client() -> Callable[..., tuple]:
    """Return a factory building ``(client, handler)`` over a mock transport."""

    def _factory(*outcomes, **client_kwargs):
        handler = RecordingHandler(*outcomes)
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        client_kwargs.setdefault("api_key", TEST_API_KEY)
        client_kwargs.setdefault("base_url", TEST_BASE_URL)
        return ModelPilot(http_client=http_client, **client_kwargs), handler

    return _factory


@pytest.fixture()
def log_records(monkeypatch: pytest.MonkeyPatch) -> Iterator[List[logging.LogRecord]]:
    """Capture records emitted under the ``modelpilot`` logger at DEBUG."""
    from modelpilot.base.logging import LOG_LEVEL_ENV, get_logger

    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")

    records: List[logging.LogRecord] = []
    logger = get_logger()
    handler = logging.Handler(level=logging.DEBUG)
    handler.emit = records.append  # type: ignore[assignment]
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)


@pytest.fixture()
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture()
def recording_handler() -> type:
    """Expose :class:`RecordingHandler` to tests that build their own transport."""
    return RecordingHandler
