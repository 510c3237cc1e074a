"""Typed configuration object passed to provider adapters.

Purpose
-------
Carry the optional fields every backend understands (credential, endpoint,
model identifiers, timeout and retry tuning) plus an ``extra`` bag for
provider-specific values. The object is frozen and passed by value into
``create_chat`` / ``create_embedder``; there is no process-wide
configuration state.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_copy``.

Notes
-----
- All durations are seconds.
- Absent fields stay ``None``; each adapter applies its own documented
  defaults via :meth:`ProviderConfig.get_or`.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ProviderConfig(BaseModel):
    """Partial provider configuration.

    Attributes
    ----------
    api_key:
        Credential for backends that require one.
    base_url:
        Endpoint override (self-hosted daemons, proxies).
    chat_model:
        Chat/completion model identifier.
    embedding_model:
        Embedding model identifier.
    timeout_seconds:
        Deadline applied by the timeout guard to each backend call.
    max_attempts:
        Embedding attempts before giving up (backoff executor).
    starting_delay_seconds / max_delay_seconds:
        Backoff bounds for embedding retries.
    headers:
        Static HTTP headers added to requests by HTTP-based adapters.
    extra:
        Provider-specific extension fields.
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    chat_model: Optional[str] = None
    embedding_model: Optional[str] = None
    timeout_seconds: Optional[float] = Field(default=None, ge=0)
    max_attempts: Optional[int] = Field(default=None, ge=1)
    starting_delay_seconds: Optional[float] = Field(default=None, ge=0)
    max_delay_seconds: Optional[float] = Field(default=None, ge=0)
    headers: Mapping[str, str] = Field(default_factory=dict)
    extra: Dict[str, Any] = Field(default_factory=dict)

    def get_or(self, name: str, default: T) -> T:
        """Return field ``name`` when set (not ``None``/blank), else ``default``."""
        value = getattr(self, name)
        if value is None:
            return default
        if isinstance(value, str) and not value.strip():
            return default
        return value


__all__ = ["ProviderConfig"]
