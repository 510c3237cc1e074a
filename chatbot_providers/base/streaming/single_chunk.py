"""Single-chunk streaming shim.

Backends without native incremental delivery still have to satisfy callers
written against an async-iterator contract. :class:`SingleChunkStream`
defers the full (non-streaming) call until the first ``__anext__`` and then
yields its result exactly once. The stream is its own iterator, so it can
be consumed only once; iterating again yields nothing.
"""
from __future__ import annotations

from typing import AsyncIterator, Awaitable, Callable, Generic, List, Optional, TypeVar

from ..models import ChatResult

T = TypeVar("T")


class SingleChunkStream(Generic[T]):
    """Lazy, one-element, non-restartable async iterator."""

    def __init__(self, producer: Callable[[], Awaitable[T]]) -> None:
        self._producer: Optional[Callable[[], Awaitable[T]]] = producer

    @property
    def exhausted(self) -> bool:
        return self._producer is None

    def __aiter__(self) -> "SingleChunkStream[T]":
        return self

    async def __anext__(self) -> T:
        producer = self._producer
        if producer is None:
            raise StopAsyncIteration
        self._producer = None
        return await producer()


async def accumulate_chunks(chunks: AsyncIterator[ChatResult]) -> ChatResult:
    """Concatenate streamed ``ChatResult`` fragments into one result."""
    parts: List[str] = []
    async for chunk in chunks:
        parts.append(chunk.content)
    return ChatResult(content="".join(parts))


__all__ = ["SingleChunkStream", "accumulate_chunks"]
