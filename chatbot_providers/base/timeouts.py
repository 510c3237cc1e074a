"""Timeout guard for async provider calls.

``with_timeout`` runs the operation as a task and waits on it with
``asyncio.wait``. When the deadline fires first the operation task is
cancelled (transports that honor cancellation, such as ``httpx``, abort the
in-flight request; others simply have their result discarded) and a
built-in ``TimeoutError`` is raised to the caller.

Design constraints
------------------
1. Durations are seconds and come from ``ProviderConfig``; there is no
   module-level timeout state.
2. ``None`` or a non-positive duration makes the guard inert.
3. Exceptions raised by the operation before the deadline propagate
   unchanged; only deadline expiry is reported as ``TimeoutError``.
"""
from __future__ import annotations

import asyncio
import contextlib
from typing import Awaitable, Callable, Optional, TypeVar

T = TypeVar("T")


async def with_timeout(operation: Callable[[], Awaitable[T]], seconds: Optional[float]) -> T:
    """Await ``operation()`` but fail with ``TimeoutError`` after ``seconds``.

    Parameters:
        operation: Zero-argument callable producing the awaitable to guard.
        seconds: Deadline in seconds; ``None`` or ``<= 0`` disables it.

    Returns:
        The operation's result when it completes in time.

    Raises:
        TimeoutError: The deadline elapsed first.
    """
    if seconds is None or seconds <= 0:
        return await operation()
    task = asyncio.ensure_future(operation())
    try:
        done, _ = await asyncio.wait({task}, timeout=seconds)
    except asyncio.CancelledError:
        task.cancel()
        raise
    if not done:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        raise TimeoutError(f"operation exceeded {seconds}s")
    return task.result()


__all__ = ["with_timeout"]
