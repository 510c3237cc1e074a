"""chatbot_providers package

Uniform chat and embedding interface over interchangeable LLM backends
(Ollama, Gemini, and an offline mock) selected at runtime by name.

Purpose:
    Applications resolve a provider handle by name, build a chat or
    embedding capability from a ``ProviderConfig``, and call it. Every
    outbound call runs behind the shared resilience layer (timeout guard,
    exponential backoff for embeddings, message normalization per backend
    dialect).

Public API (re-exported):
    - Version: ``__version__``
    - Models: :class:`Message`, :class:`ChatResult`, :class:`EmbedResult`,
      :class:`ProviderConfig`
    - Errors: :class:`ProviderError`, :class:`ConfigurationError`,
      :class:`ErrorCode`, :class:`UnknownProviderError`
    - Registry: :class:`ProviderRegistry`, :func:`default_registry`,
      :func:`resolve`, :func:`create_chat`, :func:`create_embedder`,
      :func:`available_providers`
    - Settings: :class:`Settings`, :func:`load_settings`
"""

from .base.dto import ProviderConfig
from .base.errors import ConfigurationError, ErrorCode, ProviderError
from .base.models import ChatResult, EmbedResult, Message
from .config import Settings, load_settings
from .registry import (
    ProviderRegistry,
    UnknownProviderError,
    available_providers,
    create_chat,
    create_embedder,
    default_registry,
    resolve,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Models
    "Message",
    "ChatResult",
    "EmbedResult",
    "ProviderConfig",
    # Errors
    "ProviderError",
    "ConfigurationError",
    "ErrorCode",
    "UnknownProviderError",
    # Registry
    "ProviderRegistry",
    "default_registry",
    "resolve",
    "create_chat",
    "create_embedder",
    "available_providers",
    # Settings
    "Settings",
    "load_settings",
]
