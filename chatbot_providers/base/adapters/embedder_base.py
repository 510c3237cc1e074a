"""Shared embedding policy for provider adapters.

Purpose:
- Run every embedding call under the timeout guard inside the backoff
  executor, and refuse to hand back an empty vector.

Failure semantics:
- Each attempt is bounded by ``timeout_seconds``; timeouts, transport
  errors, and empty vectors are all retried.
- After ``max_attempts`` the last failure is raised as a ``ProviderError``
  (chained from the original exception). An ingestion batch must learn that
  a chunk failed rather than index a zero vector.
"""

from __future__ import annotations

import logging
import time
from typing import List

from ..errors import ErrorCode, ProviderError, wrap_exception
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import EmbedResult
from ..resilience.backoff import BackoffConfig, with_backoff
from ..timeouts import with_timeout


class BaseEmbedder:
    """Reusable base for embedding capabilities.

    Subclasses implement :meth:`_embed_once`, returning the raw vector for a
    single attempt.
    """

    def __init__(
        self,
        *,
        provider_name: str,
        model: str,
        timeout_seconds: float | None,
        backoff: BackoffConfig,
    ) -> None:
        self._provider_name = provider_name
        self._model = model
        self._timeout_seconds = timeout_seconds
        self._backoff = backoff
        self._logger = get_logger(f"providers.{provider_name}")

    @property
    def provider_name(self) -> str:
        return self._provider_name

    @property
    def model(self) -> str:
        return self._model

    @property
    def backoff_config(self) -> BackoffConfig:
        return self._backoff

    async def _embed_once(self, text: str) -> List[float]:  # pragma: no cover - abstract
        """Call the backend once and return the embedding vector."""
        raise NotImplementedError

    async def _attempt(self, text: str) -> List[float]:
        vector = await with_timeout(lambda: self._embed_once(text), self._timeout_seconds)
        if not vector:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message=f"invalid response from {self._provider_name}: missing embedding",
                provider=self._provider_name,
                model=self._model,
                retryable=True,
            )
        return [float(v) for v in vector]

    async def embed(self, text: str) -> EmbedResult:
        """Embed ``text``; raise ``ProviderError`` once retries are exhausted."""
        ctx = LogContext(provider=self._provider_name, model=self._model, operation="embed")
        t0 = time.perf_counter()
        try:
            vector = await with_backoff(lambda: self._attempt(text), self._backoff, ctx=ctx)
        except Exception as exc:
            err = wrap_exception(exc, provider=self._provider_name, model=self._model)
            normalized_log_event(
                self._logger,
                "embed.error",
                ctx,
                phase="finalize",
                level=logging.ERROR,
                emitted=False,
                error_code=err.code.value,
                error=err.message,
                max_attempts=self._backoff.max_attempts,
            )
            raise ProviderError(
                code=err.code,
                message=f"failed to generate embedding: {err.message}",
                provider=self._provider_name,
                model=self._model,
                retryable=err.retryable,
                raw=exc,
            ) from exc

        normalized_log_event(
            self._logger,
            "embed.end",
            ctx,
            phase="finalize",
            emitted=True,
            dimensions=len(vector),
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 1),
        )
        return EmbedResult(embedding=vector)


__all__ = ["BaseEmbedder"]
