"""Helpers translating ``ProviderConfig`` into adapter constructor values.

Each adapter passes its own defaults, so an absent field never picks up a
different backend's default.
"""

from __future__ import annotations

from ..constants import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY_SECONDS,
    DEFAULT_STARTING_DELAY_SECONDS,
)
from ..dto import ProviderConfig
from ..errors import ConfigurationError
from ..resilience.backoff import BackoffConfig


def require_api_key(config: ProviderConfig, provider: str) -> str:
    """Return the configured credential or raise ``ConfigurationError``."""
    key = config.get_or("api_key", "")
    if not key:
        raise ConfigurationError(
            message=f"{provider.capitalize()} provider requires an API key",
            provider=provider,
            field="api_key",
        )
    return key.strip()


def build_backoff_config(
    config: ProviderConfig,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    starting_delay: float = DEFAULT_STARTING_DELAY_SECONDS,
    max_delay: float = DEFAULT_MAX_DELAY_SECONDS,
) -> BackoffConfig:
    """Merge the retry fields of ``config`` over the adapter's defaults."""
    return BackoffConfig(
        max_attempts=config.get_or("max_attempts", max_attempts),
        starting_delay=config.get_or("starting_delay_seconds", starting_delay),
        max_delay=config.get_or("max_delay_seconds", max_delay),
    )


__all__ = ["require_api_key", "build_backoff_config"]
