"""Ollama provider adapter.

Purpose:
        Chat and embeddings against the local Ollama HTTP API (default
        ``http://localhost:11434``).

External dependencies:
        - HTTP client only (``httpx`` via ``post_json``). No SDK or API key is
          required since Ollama is a local daemon.

Endpoints:
        - Chat: ``POST /api/generate`` with a transcript prompt
          (``System:``/``User:``/``Assistant:`` labels), ``stream: false``.
        - Embeddings: ``POST /api/embeddings`` with ``{model, prompt}``.

Timeout and retry strategy:
        - ``timeout_seconds`` is both the httpx request timeout and the
          ``with_timeout`` deadline (default 60s).
        - Embeddings retry with exponential backoff (3 attempts, 1s start, 5s
          cap by default). Chat does not retry; failures degrade to an apology.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

import httpx

from ..base.adapters import BaseChatModel, BaseEmbedder, build_backoff_config
from ..base.constants import DEFAULT_TIMEOUT_SECONDS, PROMPT_PREVIEW_CHARS
from ..base.dto import ProviderConfig
from ..base.http import join_url, post_json
from ..base.logging import LogContext, normalized_log_event
from ..base.models import WireMessage
from ..base.resilience.backoff import BackoffConfig
from ..config.defaults import (
    OLLAMA_DEFAULT_BASE_URL,
    OLLAMA_DEFAULT_CHAT_MODEL,
    OLLAMA_DEFAULT_EMBEDDING_MODEL,
    OLLAMA_EMBEDDINGS_PATH,
    OLLAMA_GENERATE_PATH,
)
from .helpers import (
    build_embeddings_payload,
    build_generate_payload,
    build_prompt,
    parse_embeddings_response,
    parse_generate_response,
)


class OllamaChat(BaseChatModel):
    """Chat capability backed by ``/api/generate``."""

    dialect = "ollama"

    def __init__(
        self,
        *,
        base_url: str,
        model: str,
        timeout_seconds: float | None,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(provider_name="ollama", model=model, timeout_seconds=timeout_seconds)
        self._base_url = base_url
        self._headers = dict(headers or {})
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _complete(self, messages: List[WireMessage]) -> str:
        prompt = build_prompt(messages)
        normalized_log_event(
            self._logger,
            "chat.request",
            LogContext(provider=self.provider_name, model=self._model, operation="chat"),
            phase="request",
            level=logging.DEBUG,
            prompt_preview=prompt[:PROMPT_PREVIEW_CHARS],
        )
        data = await post_json(
            join_url(self._base_url, OLLAMA_GENERATE_PATH),
            build_generate_payload(model=self._model, prompt=prompt),
            timeout=self._timeout_seconds,
            headers=self._headers,
            transport=self._transport,
        )
        return parse_generate_response(data, model=self._model)


class OllamaEmbedder(BaseEmbedder):
    """Embedding capability backed by ``/api/embeddings``."""

    def __init__(
        self,
        *,
        base_url: str,
        model: str,
        timeout_seconds: float | None,
        backoff: BackoffConfig,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(provider_name="ollama", model=model, timeout_seconds=timeout_seconds, backoff=backoff)
        self._base_url = base_url
        self._headers = dict(headers or {})
        self._transport = transport

    async def _embed_once(self, text: str) -> List[float]:
        data = await post_json(
            join_url(self._base_url, OLLAMA_EMBEDDINGS_PATH),
            build_embeddings_payload(model=self._model, text=text),
            timeout=self._timeout_seconds,
            headers=self._headers,
            transport=self._transport,
        )
        return parse_embeddings_response(data, model=self._model)


class OllamaProvider:
    """Provider handle for a local Ollama daemon.

    Parameters
    ----------
    transport:
        Optional ``httpx`` transport shared by every capability this handle
        creates. Production code leaves it ``None``; tests pass an
        ``httpx.MockTransport``.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._transport = transport

    @property
    def provider_name(self) -> str:
        """Return the stable provider identifier string."""
        return "ollama"

    def requires_credential(self) -> bool:
        return False

    def create_chat(self, config: ProviderConfig) -> OllamaChat:
        return OllamaChat(
            base_url=config.get_or("base_url", OLLAMA_DEFAULT_BASE_URL),
            model=config.get_or("chat_model", OLLAMA_DEFAULT_CHAT_MODEL),
            timeout_seconds=config.get_or("timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
            headers=config.headers,
            transport=self._transport,
        )

    def create_embedder(self, config: ProviderConfig) -> OllamaEmbedder:
        return OllamaEmbedder(
            base_url=config.get_or("base_url", OLLAMA_DEFAULT_BASE_URL),
            model=config.get_or("embedding_model", OLLAMA_DEFAULT_EMBEDDING_MODEL),
            timeout_seconds=config.get_or("timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
            backoff=build_backoff_config(config),
            headers=config.headers,
            transport=self._transport,
        )


__all__ = ["OllamaProvider", "OllamaChat", "OllamaEmbedder"]
