"""Gemini provider adapter.

Uses the google-generativeai SDK (``GenerativeModel.generate_content_async``
for chat, ``embed_content_async`` for embeddings).

Notes:
- Gemini has no system role. The ``gemini`` dialect folds system text into
  the first user turn and renames ``assistant`` to ``model``.
- ``genai.configure`` stores the key on SDK-global state. The adapter calls
  it immediately before every request so two handles with different keys in
  one process each send their own key.
- A missing key is rejected by ``create_chat``/``create_embedder`` with
  ``ConfigurationError`` before any network activity.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import google.generativeai as genai

from ..base.adapters import BaseChatModel, BaseEmbedder, build_backoff_config, require_api_key
from ..base.constants import DEFAULT_TIMEOUT_SECONDS
from ..base.dto import ProviderConfig
from ..base.logging import LogContext, normalized_log_event
from ..base.models import WireMessage
from ..base.resilience.backoff import BackoffConfig
from ..config.defaults import (
    GEMINI_DEFAULT_CHAT_MODEL,
    GEMINI_DEFAULT_EMBEDDING_MODEL,
    GEMINI_EMBEDDING_TASK_TYPE,
    GEMINI_GENERATION_CONFIG,
)
from .helpers import build_contents, extract_embedding, extract_text, qualify_model_name


class GeminiChat(BaseChatModel):
    """Chat capability backed by ``GenerativeModel.generate_content_async``."""

    dialect = "gemini"

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: float | None,
        generation_config: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(provider_name="gemini", model=model, timeout_seconds=timeout_seconds)
        self._api_key = api_key
        self._generation_config = dict(generation_config or GEMINI_GENERATION_CONFIG)

    @property
    def generation_config(self) -> Dict[str, Any]:
        return dict(self._generation_config)

    async def _complete(self, messages: List[WireMessage]) -> str:
        genai.configure(api_key=self._api_key)
        contents = build_contents(messages)
        normalized_log_event(
            self._logger,
            "chat.request",
            LogContext(provider=self.provider_name, model=self._model, operation="chat"),
            phase="request",
            level=logging.DEBUG,
            content_count=len(contents),
        )
        model = genai.GenerativeModel(model_name=self._model, generation_config=self._generation_config)
        response = await model.generate_content_async(contents)
        return extract_text(response)


class GeminiEmbedder(BaseEmbedder):
    """Embedding capability backed by ``genai.embed_content_async``."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: float | None,
        backoff: BackoffConfig,
        task_type: str = GEMINI_EMBEDDING_TASK_TYPE,
    ) -> None:
        super().__init__(provider_name="gemini", model=model, timeout_seconds=timeout_seconds, backoff=backoff)
        self._api_key = api_key
        self._task_type = task_type

    async def _embed_once(self, text: str) -> List[float]:
        genai.configure(api_key=self._api_key)
        result = await genai.embed_content_async(
            model=qualify_model_name(self._model),
            content=text,
            task_type=self._task_type,
        )
        return extract_embedding(result, model=self._model)


class GeminiProvider:
    """Provider handle for Google Gemini; requires an API key."""

    @property
    def provider_name(self) -> str:
        return "gemini"

    def requires_credential(self) -> bool:
        return True

    def create_chat(self, config: ProviderConfig) -> GeminiChat:
        api_key = require_api_key(config, self.provider_name)
        generation_config = {**GEMINI_GENERATION_CONFIG, **config.extra.get("generation_config", {})}
        return GeminiChat(
            api_key=api_key,
            model=config.get_or("chat_model", GEMINI_DEFAULT_CHAT_MODEL),
            timeout_seconds=config.get_or("timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
            generation_config=generation_config,
        )

    def create_embedder(self, config: ProviderConfig) -> GeminiEmbedder:
        api_key = require_api_key(config, self.provider_name)
        return GeminiEmbedder(
            api_key=api_key,
            model=config.get_or("embedding_model", GEMINI_DEFAULT_EMBEDDING_MODEL),
            timeout_seconds=config.get_or("timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
            backoff=build_backoff_config(config),
            task_type=config.extra.get("task_type", GEMINI_EMBEDDING_TASK_TYPE),
        )


__all__ = ["GeminiProvider", "GeminiChat", "GeminiEmbedder"]
