"""
Providers Base Package

Exports the provider-agnostic contracts, DTOs, and resilience primitives
used by the backend adapters:

- Interfaces: ``ProviderHandle``, ``ChatModel``, ``Embedder``
- Models: ``Message``, ``ChatResult``, ``EmbedResult``, ``ProviderConfig``
- Resilience: ``with_backoff``, ``with_timeout``
- Normalization: ``normalize``
- Streaming: ``SingleChunkStream``
"""

from .dto import ProviderConfig
from .errors import ConfigurationError, ErrorCode, ProviderError, classify_exception
from .interfaces import ChatModel, Embedder, ProviderHandle
from .models import ChatResult, EmbedResult, Message, Role, WireMessage
from .resilience import BackoffConfig, with_backoff
from .streaming import SingleChunkStream, accumulate_chunks
from .timeouts import with_timeout
from .utils.messages import DIALECTS, normalize

__all__ = [
    # Models
    "Message",
    "Role",
    "WireMessage",
    "ChatResult",
    "EmbedResult",
    "ProviderConfig",
    # Interfaces
    "ProviderHandle",
    "ChatModel",
    "Embedder",
    # Errors
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "classify_exception",
    # Resilience
    "BackoffConfig",
    "with_backoff",
    "with_timeout",
    # Normalization & streaming
    "DIALECTS",
    "normalize",
    "SingleChunkStream",
    "accumulate_chunks",
]
