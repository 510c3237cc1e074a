from __future__ import annotations

import asyncio

import pytest

from chatbot_providers.base.timeouts import with_timeout


@pytest.mark.asyncio
async def test_returns_value_before_deadline():
    async def op():
        return 42

    assert await with_timeout(op, 1.0) == 42  # nosec B101


@pytest.mark.asyncio
async def test_deadline_raises_builtin_timeout_and_cancels_operation():
    cancelled = asyncio.Event()

    async def op():
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    with pytest.raises(TimeoutError) as ei:
        await with_timeout(op, 0.01)
    assert "operation exceeded 0.01s" in str(ei.value)  # nosec B101
    assert cancelled.is_set()  # nosec B101


@pytest.mark.asyncio
async def test_operation_errors_propagate_unchanged():
    err = ValueError("bad")

    async def op():
        raise err

    with pytest.raises(ValueError) as ei:
        await with_timeout(op, 1.0)
    assert ei.value is err  # nosec B101


@pytest.mark.asyncio
@pytest.mark.parametrize("seconds", [None, 0, -1])
async def test_non_positive_or_missing_deadline_is_inert(seconds):
    async def op():
        await asyncio.sleep(0.01)
        return "done"

    assert await with_timeout(op, seconds) == "done"  # nosec B101


@pytest.mark.asyncio
async def test_operation_raising_timeout_error_itself_is_not_relabelled():
    err = TimeoutError("backend said so")

    async def op():
        raise err

    with pytest.raises(TimeoutError) as ei:
        await with_timeout(op, 5)
    assert ei.value is err  # nosec B101
    assert str(ei.value) == "backend said so"  # nosec B101
