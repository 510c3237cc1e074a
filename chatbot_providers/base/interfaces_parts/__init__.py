"""Interface parts package (one Protocol per module)."""

from .chat_model import ChatModel
from .embedder import Embedder
from .provider_handle import ProviderHandle

__all__ = ["ChatModel", "Embedder", "ProviderHandle"]
