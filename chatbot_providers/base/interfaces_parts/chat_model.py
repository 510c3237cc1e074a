"""ChatModel Protocol (single-class module)."""

from __future__ import annotations

from typing import AsyncIterator, Protocol, Sequence, runtime_checkable

from ..models import ChatResult, Message


@runtime_checkable
class ChatModel(Protocol):
    """Chat capability produced by ``ProviderHandle.create_chat``.

    ``answer_question`` never raises for backend failures; it returns an
    apology ``ChatResult`` instead. Reserve exceptions for programmer errors.
    """

    async def answer_question(self, messages: Sequence[Message]) -> ChatResult:
        ...

    def answer_question_stream(self, messages: Sequence[Message]) -> AsyncIterator[ChatResult]:
        ...
