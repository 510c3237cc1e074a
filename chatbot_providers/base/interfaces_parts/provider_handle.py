"""ProviderHandle Protocol (single-class module).

Defines the capability set every backend variant exposes to the registry.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..dto import ProviderConfig
from .chat_model import ChatModel
from .embedder import Embedder


@runtime_checkable
class ProviderHandle(Protocol):
    """One instance per backend, created at startup and shared freely.

    Handles hold no per-request state, so concurrent callers may use the
    same instance without locking.
    """

    @property
    def provider_name(self) -> str:
        """Lowercase registry key, e.g. ``"ollama"``."""
        ...

    def requires_credential(self) -> bool:
        """Return True when ``ProviderConfig.api_key`` is mandatory."""
        ...

    def create_chat(self, config: ProviderConfig) -> ChatModel:
        """Build a chat capability; raise ``ConfigurationError`` on missing fields."""
        ...

    def create_embedder(self, config: ProviderConfig) -> Embedder:
        """Build an embedding capability; raise ``ConfigurationError`` on missing fields."""
        ...
