"""Deterministic mock provider for offline use.

Purpose
-------
Implement the provider handle contract without any network traffic so the
CLI, the registry, and higher layers can be exercised in tests and demos.

Behavior
--------
- Chat echoes the last user message as ``"mock: <content>"``. A
  conversation with no user message yields an empty completion, which the
  shared chat base turns into the error apology like any other backend.
- Embeddings are an 8-dimensional vector derived from the SHA-256 digest of
  the text; identical text always maps to the same vector.

External dependencies
---------------------
Standard library only (``hashlib``).
"""

from __future__ import annotations

import hashlib
from typing import List

from ..base.adapters import BaseChatModel, BaseEmbedder, build_backoff_config
from ..base.dto import ProviderConfig
from ..base.models import WireMessage
from ..base.utils.messages import last_user_content
from ..config.defaults import (
    MOCK_DEFAULT_CHAT_MODEL,
    MOCK_DEFAULT_EMBEDDING_MODEL,
    MOCK_EMBEDDING_DIMENSIONS,
)

_ECHO_PREFIX = "mock: "


def deterministic_vector(text: str, dimensions: int = MOCK_EMBEDDING_DIMENSIONS) -> List[float]:
    """Map ``text`` to a stable vector with components in ``[0, 1]``."""
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return [digest[i % len(digest)] / 255.0 for i in range(dimensions)]


class MockChat(BaseChatModel):
    """Echoing chat capability."""

    async def _complete(self, messages: List[WireMessage]) -> str:
        content = last_user_content(messages)
        return f"{_ECHO_PREFIX}{content}" if content else ""


class MockEmbedder(BaseEmbedder):
    """Hash-based embedding capability."""

    def __init__(self, *, dimensions: int = MOCK_EMBEDDING_DIMENSIONS, **kwargs) -> None:
        super().__init__(**kwargs)
        self._dimensions = dimensions

    async def _embed_once(self, text: str) -> List[float]:
        return deterministic_vector(text, self._dimensions)


class MockProvider:
    """Provider handle that never leaves the process."""

    @property
    def provider_name(self) -> str:
        return "mock"

    def requires_credential(self) -> bool:
        return False

    def create_chat(self, config: ProviderConfig) -> MockChat:
        return MockChat(
            provider_name=self.provider_name,
            model=config.get_or("chat_model", MOCK_DEFAULT_CHAT_MODEL),
            timeout_seconds=config.timeout_seconds,
        )

    def create_embedder(self, config: ProviderConfig) -> MockEmbedder:
        return MockEmbedder(
            provider_name=self.provider_name,
            model=config.get_or("embedding_model", MOCK_DEFAULT_EMBEDDING_MODEL),
            timeout_seconds=config.timeout_seconds,
            backoff=build_backoff_config(config, max_attempts=1),
            dimensions=int(config.extra.get("dimensions", MOCK_EMBEDDING_DIMENSIONS)),
        )


__all__ = ["MockProvider", "MockChat", "MockEmbedder", "deterministic_vector"]
