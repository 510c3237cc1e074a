"""Mock provider package exposing a deterministic offline backend."""

from .client import MockChat, MockEmbedder, MockProvider, deterministic_vector

__all__ = ["MockProvider", "MockChat", "MockEmbedder", "deterministic_vector"]
