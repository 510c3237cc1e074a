"""Exponential backoff executor for async provider operations.

Purpose
-------
Retry a failing coroutine with exponentially growing, capped delays plus a
small additive jitter so concurrent callers do not retry in lockstep.

Delay schedule
--------------
Before attempt ``k`` (``k >= 2``) the base delay is
``min(starting_delay * 2 ** (k - 2), max_delay)``. The actual wait adds a
jitter drawn uniformly from ``[0, jitter_ratio * base]``; jitter is never
subtracted.

Failure semantics
-----------------
- Any ``Exception`` raised by the operation triggers a retry until
  ``max_attempts`` is reached; the last exception is then re-raised
  unchanged.
- ``asyncio.CancelledError`` is not an ``Exception`` and propagates
  immediately.
- A WARNING ``retry.attempt`` event is logged before every retry. Logging
  and ``attempt_logger`` callbacks are advisory and never change control
  flow.
"""
from __future__ import annotations

import asyncio
import functools
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Protocol, TypeVar

from ..errors import classify_exception
from ..logging import LogContext, get_logger, normalized_log_event

T = TypeVar("T")

_logger = get_logger("providers.backoff")


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: BaseException | None,
    ) -> None: ...


@dataclass(frozen=True)
class BackoffConfig:
    """Retry tuning for :func:`with_backoff`.

    Attributes:
        max_attempts: Total attempts including the first one (>= 1).
        starting_delay: Base delay in seconds before the second attempt.
        max_delay: Upper bound in seconds for the base delay.
        jitter_ratio: Fraction of the base delay used as the jitter ceiling.
        attempt_logger: Optional callback invoked after each failed attempt.
    """

    max_attempts: int = 3
    starting_delay: float = 1.0
    max_delay: float = 5.0
    jitter_ratio: float = 0.1
    attempt_logger: AttemptLogger | None = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.starting_delay < 0 or self.max_delay < 0 or self.jitter_ratio < 0:
            raise ValueError("delays and jitter_ratio must be non-negative")

    def base_delay(self, attempt: int) -> float:
        """Return the un-jittered delay (seconds) before ``attempt`` (2-based)."""
        if attempt < 2:
            raise ValueError("delays apply from the second attempt onward")
        return min(self.starting_delay * (2 ** (attempt - 2)), self.max_delay)

    def jittered_delay(self, attempt: int, uniform: Callable[[float, float], float] = random.uniform) -> float:
        """Return the base delay for ``attempt`` plus non-negative jitter."""
        base = self.base_delay(attempt)
        return base + uniform(0.0, self.jitter_ratio * base)


DEFAULT_BACKOFF_CONFIG = BackoffConfig()


def _notify(config: BackoffConfig, ctx: Optional[LogContext], *, attempt: int, delay: float | None, error: BaseException) -> None:
    """Emit the retry warning and the optional callback; never raises."""
    try:
        normalized_log_event(
            _logger,
            "retry.attempt",
            ctx,
            phase="retry",
            level=logging.WARNING,
            attempt=attempt,
            max_attempts=config.max_attempts,
            delay_seconds=round(delay, 3) if delay is not None else None,
            will_retry=delay is not None,
            error_code=classify_exception(error).value,
            error=str(error) or type(error).__name__,
        )
        if config.attempt_logger:
            config.attempt_logger(
                attempt=attempt,
                max_attempts=config.max_attempts,
                delay=delay,
                error=error,
            )
    except Exception:  # nosec B110 - observation must not affect the retried call
        _logger.debug("retry observer failed", exc_info=True)


async def with_backoff(
    operation: Callable[[], Awaitable[T]],
    config: BackoffConfig = DEFAULT_BACKOFF_CONFIG,
    *,
    ctx: Optional[LogContext] = None,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    uniform: Callable[[float, float], float] = random.uniform,
) -> T:
    """Run ``operation`` with retries and exponential backoff.

    Parameters:
        operation: Zero-argument callable returning a fresh awaitable per attempt.
        config: Retry tuning.
        ctx: Optional log context attached to retry warnings.
        sleep: Awaitable sleep function (injectable for tests).
        uniform: Jitter source with ``random.uniform`` semantics.

    Returns:
        The first successful result.

    Raises:
        Exception: The exception from the final attempt, unchanged.
    """
    attempt = 1
    while True:
        try:
            return await operation()
        except Exception as exc:
            if attempt >= config.max_attempts:
                _notify(config, ctx, attempt=attempt, delay=None, error=exc)
                raise
            delay = config.jittered_delay(attempt + 1, uniform)
            _notify(config, ctx, attempt=attempt, delay=delay, error=exc)
            await sleep(delay)
            attempt += 1


def backoff(config: BackoffConfig = DEFAULT_BACKOFF_CONFIG):
    """Decorator form of :func:`with_backoff` for async callables."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            return await with_backoff(lambda: func(*args, **kwargs), config)

        return wrapper

    return decorator


__all__ = [
    "AttemptLogger",
    "BackoffConfig",
    "DEFAULT_BACKOFF_CONFIG",
    "with_backoff",
    "backoff",
]
