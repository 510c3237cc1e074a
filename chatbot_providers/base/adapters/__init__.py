"""Shared adapter bases carrying the chat-degrade and embed-retry policies."""

from .chat_base import BaseChatModel
from .embedder_base import BaseEmbedder
from .params import build_backoff_config, require_api_key

__all__ = ["BaseChatModel", "BaseEmbedder", "build_backoff_config", "require_api_key"]
