"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports the single-class modules under
``chatbot_providers.base.interfaces_parts`` while keeping imports stable.
"""

from __future__ import annotations

from .interfaces_parts import ChatModel, Embedder, ProviderHandle

__all__ = ["ProviderHandle", "ChatModel", "Embedder"]
