from __future__ import annotations

import pytest

from chatbot_providers.base.models import ChatResult, Message
from chatbot_providers.base.streaming import SingleChunkStream, accumulate_chunks
from chatbot_providers.mock import MockProvider
from chatbot_providers.base.dto import ProviderConfig


@pytest.mark.asyncio
async def test_yields_exactly_once_then_exhausted():
    calls = 0

    async def produce():
        nonlocal calls
        calls += 1
        return ChatResult(content="whole answer")

    stream = SingleChunkStream(produce)
    assert calls == 0  # nosec B101 - lazy until first pull
    chunks = [c async for c in stream]
    assert chunks == [ChatResult(content="whole answer")]  # nosec B101
    assert stream.exhausted  # nosec B101
    assert [c async for c in stream] == []  # nosec B101
    assert calls == 1  # nosec B101


@pytest.mark.asyncio
async def test_producer_errors_surface_on_first_pull():
    async def produce():
        raise RuntimeError("backend exploded")

    stream = SingleChunkStream(produce)
    with pytest.raises(RuntimeError):
        await stream.__anext__()
    with pytest.raises(StopAsyncIteration):
        await stream.__anext__()


@pytest.mark.asyncio
async def test_chat_stream_matches_answer_question():
    chat = MockProvider().create_chat(ProviderConfig())
    msgs = [Message.user("ping")]
    direct = await chat.answer_question(msgs)
    streamed = await accumulate_chunks(chat.answer_question_stream(msgs))
    assert streamed == direct  # nosec B101
