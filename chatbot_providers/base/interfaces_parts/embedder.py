"""Embedder Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import EmbedResult


@runtime_checkable
class Embedder(Protocol):
    """Embedding capability produced by ``ProviderHandle.create_embedder``.

    Unlike chat, failures surface: after retries are exhausted ``embed``
    raises instead of returning an empty vector.
    """

    async def embed(self, text: str) -> EmbedResult:
        ...
