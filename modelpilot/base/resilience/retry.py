from __future__ import annotations

import functools
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Protocol, TypeVar

from ..errors import ModelPilotError, error_from_exception, is_retryable

T = TypeVar("T")


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: ModelPilotError | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = 3
    base_delay: float = 1.0  # seconds, doubled per retry
    max_delay: float = 10.0
    retryable: Callable[[ModelPilotError], bool] = is_retryable
    attempt_logger: AttemptLogger | None = None

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delays(self) -> Iterable[float]:
        for attempt in range(self.max_retries):
            yield min(self.base_delay * 2**attempt, self.max_delay)


DEFAULT_RETRY_CONFIG = RetryConfig()


def retry(config: RetryConfig = DEFAULT_RETRY_CONFIG):
    """Return a decorator applying the client retry policy.

    - Runs one attempt plus up to ``config.max_retries`` retries
    - Retries only errors accepted by ``config.retryable``
    - Sleeps ``min(base_delay * 2**n, max_delay)`` before retry ``n``
    - Exceptions other than ``ModelPilotError`` are wrapped as transport
      failures before the retry decision
    - After the last attempt the last error is raised
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            last_exc: ModelPilotError | None = None
            for attempt, delay in enumerate(
                list(config.delays()) + [None]
            ):  # final attempt has delay None
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    err = error_from_exception(e)
                    last_exc = err
                    if config.attempt_logger:
                        config.attempt_logger(
                            attempt=attempt,
                            max_attempts=config.max_attempts,
                            delay=delay,
                            error=err,
                        )
                    if config.retryable(err) and delay is not None:
                        time.sleep(delay)
                        continue
                    if err is e:
                        raise
                    raise err from e
                if config.attempt_logger:
                    config.attempt_logger(
                        attempt=attempt,
                        max_attempts=config.max_attempts,
                        delay=None,
                        error=None,
                    )
                return result
            if last_exc is None:  # pragma: no cover - unreachable
                raise RuntimeError(
                    "retry: reached terminal state without captured exception"
                )
            raise last_exc

        return wrapper

    return decorator


__all__ = [
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "retry",
]
