"""Policy tests for the shared chat and embedding bases.

Uses tiny in-test subclasses so the degrade/retry rules are checked
independently of any backend.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List

import pytest

from chatbot_providers.base.adapters import BaseChatModel, BaseEmbedder, build_backoff_config, require_api_key
from chatbot_providers.base.constants import ERROR_APOLOGY, TIMEOUT_APOLOGY
from chatbot_providers.base.dto import ProviderConfig
from chatbot_providers.base.errors import ConfigurationError, ErrorCode, ProviderError
from chatbot_providers.base.models import ChatResult, Message, WireMessage
from chatbot_providers.base.resilience.backoff import BackoffConfig

_FAST = BackoffConfig(max_attempts=3, starting_delay=0.0, max_delay=0.0)


class _ScriptedChat(BaseChatModel):
    dialect = "gemini"

    def __init__(self, behavior, timeout_seconds=1.0):
        super().__init__(provider_name="scripted", model="m", timeout_seconds=timeout_seconds)
        self.behavior = behavior
        self.seen: List[List[WireMessage]] = []

    async def _complete(self, messages):
        self.seen.append(messages)
        return await self.behavior()


class _ScriptedEmbedder(BaseEmbedder):
    def __init__(self, results, backoff=_FAST, timeout_seconds=1.0):
        super().__init__(provider_name="scripted", model="e", timeout_seconds=timeout_seconds, backoff=backoff)
        self.results = list(results)
        self.calls = 0

    async def _embed_once(self, text):
        self.calls += 1
        item = self.results.pop(0)
        if isinstance(item, BaseException):
            raise item
        if item == "hang":
            await asyncio.sleep(10)
        return item


@pytest.mark.asyncio
async def test_chat_success_normalizes_for_dialect(provider_logs):
    async def ok():
        return "answer"

    chat = _ScriptedChat(ok)
    result = await chat.answer_question([Message.system("S"), Message.user("Q")])
    assert result == ChatResult(content="answer")  # nosec B101
    assert chat.seen[0] == [WireMessage(role="user", content="[System Instructions: S]\n\nQ")]  # nosec B101
    assert provider_logs.events("chat.end")  # nosec B101


@pytest.mark.asyncio
async def test_chat_timeout_returns_timeout_apology(provider_logs):
    async def hang():
        await asyncio.sleep(10)
        return "late"

    result = await _ScriptedChat(hang, timeout_seconds=0.01).answer_question([Message.user("Q")])
    assert result.content == TIMEOUT_APOLOGY  # nosec B101
    (event,) = provider_logs.events("chat.timeout")
    assert event["_level"] == logging.ERROR and event["error_code"] == "timeout"  # nosec B101


@pytest.mark.asyncio
async def test_chat_error_and_empty_text_return_error_apology(provider_logs):
    async def boom():
        raise RuntimeError("connection refused")

    async def empty():
        return ""

    assert (await _ScriptedChat(boom).answer_question([Message.user("Q")])).content == ERROR_APOLOGY  # nosec B101
    assert (await _ScriptedChat(empty).answer_question([Message.user("Q")])).content == ERROR_APOLOGY  # nosec B101
    assert len(provider_logs.events("chat.error")) == 2  # nosec B101


@pytest.mark.asyncio
async def test_embed_retries_then_succeeds():
    embedder = _ScriptedEmbedder([RuntimeError("503 unavailable"), [], [0.5, 1]])
    result = await embedder.embed("t")
    assert result.embedding == [0.5, 1.0]  # nosec B101
    assert embedder.calls == 3  # nosec B101


@pytest.mark.asyncio
async def test_embed_exhaustion_raises_chained_provider_error(provider_logs):
    cause = RuntimeError("connection refused")
    embedder = _ScriptedEmbedder([cause, cause, cause])
    with pytest.raises(ProviderError) as ei:
        await embedder.embed("t")
    err = ei.value
    assert err.message.startswith("failed to generate embedding")  # nosec B101
    assert err.code is ErrorCode.UNAVAILABLE  # nosec B101
    assert err.__cause__ is cause and err.raw is cause  # nosec B101
    assert embedder.calls == 3  # nosec B101
    assert provider_logs.events("embed.error")  # nosec B101


@pytest.mark.asyncio
async def test_embed_attempts_are_timeout_guarded():
    embedder = _ScriptedEmbedder(["hang", "hang"], backoff=BackoffConfig(max_attempts=2, starting_delay=0.0), timeout_seconds=0.01)
    with pytest.raises(ProviderError) as ei:
        await embedder.embed("t")
    assert ei.value.code is ErrorCode.TIMEOUT  # nosec B101
    assert embedder.calls == 2  # nosec B101


def test_require_api_key_and_backoff_params():
    with pytest.raises(ConfigurationError):
        require_api_key(ProviderConfig(api_key="  "), "gemini")
    assert require_api_key(ProviderConfig(api_key=" k "), "gemini") == "k"  # nosec B101
    cfg = build_backoff_config(ProviderConfig(max_attempts=5))
    assert (cfg.max_attempts, cfg.starting_delay, cfg.max_delay) == (5, 1.0, 5.0)  # nosec B101
