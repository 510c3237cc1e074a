"""Ollama provider package."""

from .client import OllamaChat, OllamaEmbedder, OllamaProvider

__all__ = ["OllamaProvider", "OllamaChat", "OllamaEmbedder"]
