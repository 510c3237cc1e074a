"""Shared chat policy for provider adapters.

Purpose:
- Give every backend the same request-response contract: normalize the
  conversation, guard the backend call with ``with_timeout``, and turn any
  failure into an apologetic ``ChatResult`` instead of an exception.

Fallback semantics:
- Timeouts yield ``TIMEOUT_APOLOGY``; every other failure yields
  ``ERROR_APOLOGY``. The distinction is otherwise visible only in the logged
  ``chat.timeout`` / ``chat.error`` events.
- An empty completion from the backend counts as a failure so callers never
  receive a partially populated turn.

Streaming:
- ``answer_question_stream`` wraps ``answer_question`` in a
  ``SingleChunkStream``; subclasses with native streaming may override it.
"""

from __future__ import annotations

import logging
import time
from typing import List, Sequence

from ..constants import ERROR_APOLOGY, TIMEOUT_APOLOGY
from ..errors import ErrorCode, ProviderError, classify_exception
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import ChatResult, Message, WireMessage
from ..streaming import SingleChunkStream
from ..timeouts import with_timeout
from ..utils.messages import normalize


class BaseChatModel:
    """Reusable base for chat capabilities.

    Subclasses set ``dialect`` and implement :meth:`_complete`, which
    receives dialect-normalized messages and returns the assistant text.
    """

    dialect: str = "chat"

    def __init__(self, *, provider_name: str, model: str, timeout_seconds: float | None) -> None:
        self._provider_name = provider_name
        self._model = model
        self._timeout_seconds = timeout_seconds
        self._logger = get_logger(f"providers.{provider_name}")

    @property
    def provider_name(self) -> str:
        return self._provider_name

    @property
    def model(self) -> str:
        return self._model

    @property
    def timeout_seconds(self) -> float | None:
        return self._timeout_seconds

    async def _complete(self, messages: List[WireMessage]) -> str:  # pragma: no cover - abstract
        """Call the backend and return the assistant text."""
        raise NotImplementedError

    async def answer_question(self, messages: Sequence[Message]) -> ChatResult:
        """Return the assistant's answer; never raises for backend failures."""
        ctx = LogContext(provider=self._provider_name, model=self._model, operation="chat")
        wire = normalize(messages, self.dialect)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            message_count=len(wire),
            timeout_seconds=self._timeout_seconds,
        )
        t0 = time.perf_counter()
        try:
            text = await with_timeout(lambda: self._complete(wire), self._timeout_seconds)
            if not text:
                raise ProviderError(
                    code=ErrorCode.VALIDATION,
                    message="backend returned an empty completion",
                    provider=self._provider_name,
                    model=self._model,
                )
        except Exception as exc:
            code = classify_exception(exc)
            timed_out = code is ErrorCode.TIMEOUT
            normalized_log_event(
                self._logger,
                "chat.timeout" if timed_out else "chat.error",
                ctx,
                phase="finalize",
                level=logging.ERROR,
                emitted=False,
                error_code=code.value,
                error=str(exc) or type(exc).__name__,
                latency_ms=round((time.perf_counter() - t0) * 1000.0, 1),
            )
            return ChatResult(content=TIMEOUT_APOLOGY if timed_out else ERROR_APOLOGY)

        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 1),
        )
        return ChatResult(content=text)

    def answer_question_stream(self, messages: Sequence[Message]) -> SingleChunkStream[ChatResult]:
        """Return a one-chunk stream that computes the full answer lazily."""
        snapshot = tuple(messages)
        return SingleChunkStream(lambda: self.answer_question(snapshot))


__all__ = ["BaseChatModel"]
