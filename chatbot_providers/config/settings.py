"""Settings loader.

Purpose
-------
Read provider selection and tuning from the environment (plus an optional
``.env`` file) into an immutable :class:`Settings` object, and map it to the
``ProviderConfig`` of one provider.

Notes
-----
- Millisecond variables (``LLM_TIMEOUT_MS`` and the retry delays) are
  converted to seconds.
- Model names left unset stay ``None`` so each adapter applies its own
  default.
- Validation happens at load time: an unknown selector, a malformed number,
  or ``gemini`` without a key fails fast.
"""

from __future__ import annotations

from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..base.dto import ProviderConfig
from ..base.errors import ConfigurationError
from ..registry import BUILTIN_PROVIDERS, UnknownProviderError
from .defaults import DEFAULT_PROVIDER
from .env import (
    ENV_GEMINI_API_KEY,
    ENV_GEMINI_CHAT_MODEL,
    ENV_GEMINI_EMBEDDING_MODEL,
    ENV_OLLAMA_BASE_URL,
    ENV_OLLAMA_CHAT_MODEL,
    ENV_OLLAMA_EMBEDDING_MODEL,
    ENV_PROVIDER,
    ENV_RETRY_ATTEMPTS,
    ENV_RETRY_MAX_DELAY_MS,
    ENV_RETRY_STARTING_DELAY_MS,
    ENV_TIMEOUT_MS,
    lookup,
    merged_environment,
)

DEFAULT_TIMEOUT_MS = 60000


class Settings(BaseModel):
    """Resolved, validated settings for the provider layer."""

    model_config = ConfigDict(frozen=True)

    provider: str = DEFAULT_PROVIDER
    ollama_base_url: Optional[str] = None
    ollama_chat_model: Optional[str] = None
    ollama_embedding_model: Optional[str] = None
    gemini_api_key: Optional[str] = Field(default=None, repr=False)
    gemini_chat_model: Optional[str] = None
    gemini_embedding_model: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_MS / 1000.0
    max_attempts: Optional[int] = None
    starting_delay_seconds: Optional[float] = None
    max_delay_seconds: Optional[float] = None

    def provider_config(self, name: Optional[str] = None) -> ProviderConfig:
        """Return the ``ProviderConfig`` for ``name`` (default: the selected provider).

        Only fields belonging to that provider are populated.
        """
        key = (name or self.provider).strip().lower()
        if key not in BUILTIN_PROVIDERS:
            raise UnknownProviderError(name or self.provider, tuple(sorted(BUILTIN_PROVIDERS)))
        common = {
            "timeout_seconds": self.timeout_seconds,
            "max_attempts": self.max_attempts,
            "starting_delay_seconds": self.starting_delay_seconds,
            "max_delay_seconds": self.max_delay_seconds,
        }
        if key == "ollama":
            return ProviderConfig(
                base_url=self.ollama_base_url,
                chat_model=self.ollama_chat_model,
                embedding_model=self.ollama_embedding_model,
                **common,
            )
        if key == "gemini":
            return ProviderConfig(
                api_key=self.gemini_api_key,
                chat_model=self.gemini_chat_model,
                embedding_model=self.gemini_embedding_model,
                **common,
            )
        return ProviderConfig(**common)


def _int_var(env: Mapping[str, str], name: str, *, minimum: int) -> Optional[int]:
    raw = lookup(env, name)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            message=f"{name} must be an integer, got {raw!r}",
            field=name,
        ) from exc
    if value < minimum:
        raise ConfigurationError(message=f"{name} must be >= {minimum}, got {value}", field=name)
    return value


def _ms_to_seconds(value: Optional[int]) -> Optional[float]:
    return None if value is None else value / 1000.0


def load_settings(env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None) -> Settings:
    """Build validated :class:`Settings` from ``env`` and an optional ``.env`` file.

    Parameters
    ----------
    env:
        Environment mapping; defaults to a snapshot of ``os.environ``.
    dotenv_path:
        ``.env`` file merged under ``env``; defaults to ``$DOTENV_FILE`` or
        ``./.env``.

    Raises
    ------
    UnknownProviderError
        ``LLM_PROVIDER`` names no built-in provider.
    ConfigurationError
        A numeric variable is malformed, or ``gemini`` is selected without
        ``GEMINI_API_KEY``/``GOOGLE_API_KEY``.
    """
    merged = merged_environment(env, dotenv_path)

    selector = lookup(merged, ENV_PROVIDER) or DEFAULT_PROVIDER
    provider = selector.strip().lower()
    if provider not in BUILTIN_PROVIDERS:
        raise UnknownProviderError(selector, tuple(sorted(BUILTIN_PROVIDERS)))

    gemini_api_key = lookup(merged, ENV_GEMINI_API_KEY)
    if provider == "gemini" and not gemini_api_key:
        raise ConfigurationError(
            message="GEMINI_API_KEY (or GOOGLE_API_KEY) is required when LLM_PROVIDER=gemini",
            provider="gemini",
            field=ENV_GEMINI_API_KEY,
        )

    timeout_ms = _int_var(merged, ENV_TIMEOUT_MS, minimum=0)
    return Settings(
        provider=provider,
        ollama_base_url=lookup(merged, ENV_OLLAMA_BASE_URL),
        ollama_chat_model=lookup(merged, ENV_OLLAMA_CHAT_MODEL),
        ollama_embedding_model=lookup(merged, ENV_OLLAMA_EMBEDDING_MODEL),
        gemini_api_key=gemini_api_key,
        gemini_chat_model=lookup(merged, ENV_GEMINI_CHAT_MODEL),
        gemini_embedding_model=lookup(merged, ENV_GEMINI_EMBEDDING_MODEL),
        timeout_seconds=(DEFAULT_TIMEOUT_MS if timeout_ms is None else timeout_ms) / 1000.0,
        max_attempts=_int_var(merged, ENV_RETRY_ATTEMPTS, minimum=1),
        starting_delay_seconds=_ms_to_seconds(_int_var(merged, ENV_RETRY_STARTING_DELAY_MS, minimum=0)),
        max_delay_seconds=_ms_to_seconds(_int_var(merged, ENV_RETRY_MAX_DELAY_MS, minimum=0)),
    )


__all__ = ["Settings", "load_settings", "DEFAULT_TIMEOUT_MS"]
