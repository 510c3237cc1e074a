"""Gemini provider package."""

from .client import GeminiChat, GeminiEmbedder, GeminiProvider

__all__ = ["GeminiProvider", "GeminiChat", "GeminiEmbedder"]
