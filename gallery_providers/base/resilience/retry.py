from __future__ import annotations

import functools
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Protocol, TypeVar, runtime_checkable

from ..errors import RETRYABLE_CODES, ErrorCode, ProviderError, classify_exception

T = TypeVar("T")


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: BaseException | None,
        code: ErrorCode | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 3
    delay_base: float = 2.0  # exponential base (delay_base ** attempt)
    retryable_codes: frozenset[ErrorCode] = RETRYABLE_CODES
    attempt_logger: AttemptLogger | None = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.delay_base < 0:
            raise ValueError("delay_base must be >= 0")

    def delays(self) -> Iterable[float]:
        for attempt in range(self.max_attempts - 1):
            yield self.delay_base**attempt


DEFAULT_RETRY_CONFIG = RetryConfig()


def _is_retryable(exc: BaseException, code: ErrorCode, config: RetryConfig) -> bool:
    # A ProviderError states its own retryability; anything else goes by category.
    if isinstance(exc, ProviderError):
        return bool(exc.retryable)
    return code in config.retryable_codes


def retry(config: RetryConfig = DEFAULT_RETRY_CONFIG):
    """Return a decorator applying the standardized retry policy.

    - Any exception is classified via ``classify_exception``; only configured
      retryable codes are retried, except that a ``ProviderError`` is retried
      exactly when its ``retryable`` flag is set
    - Exponential backoff using ``delay_base ** attempt``
    - The original exception is re-raised unmodified when it is not retryable
      or when attempts are exhausted
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            # final attempt has delay None
            for attempt, delay in enumerate(list(config.delays()) + [None]):
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    code = classify_exception(e)
                    retrying = delay is not None and _is_retryable(e, code, config)
                    if config.attempt_logger:
                        config.attempt_logger(
                            attempt=attempt,
                            max_attempts=config.max_attempts,
                            delay=delay if retrying else None,
                            error=e,
                            code=code,
                        )
                    if retrying:
                        time.sleep(delay)
                        continue
                    raise
                if config.attempt_logger:
                    config.attempt_logger(
                        attempt=attempt,
                        max_attempts=config.max_attempts,
                        delay=None,
                        error=None,
                        code=None,
                    )
                return result
            raise RuntimeError("retry: reached terminal state without result")  # pragma: no cover

        return wrapper

    return decorator


@runtime_checkable
class RetryPolicy(Protocol):
    """Strategy that runs a unit of work, re-invoking it on transient failure."""

    def execute(self, operation: Callable[[], T]) -> T:
        """Run ``operation`` under the policy and return its result."""
        ...


@dataclass(frozen=True)
class RetryTemplate:
    """Default :class:`RetryPolicy` backed by :func:`retry`."""

    config: RetryConfig = DEFAULT_RETRY_CONFIG

    def execute(self, operation: Callable[[], T]) -> T:
        return retry(self.config)(operation)()


DEFAULT_RETRY_TEMPLATE = RetryTemplate()


__all__ = [
    "AttemptLogger",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "retry",
    "RetryPolicy",
    "RetryTemplate",
    "DEFAULT_RETRY_TEMPLATE",
]
