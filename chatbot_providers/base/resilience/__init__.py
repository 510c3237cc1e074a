"""Resilience helpers (backoff executor)."""

from .backoff import DEFAULT_BACKOFF_CONFIG, BackoffConfig, backoff, with_backoff

__all__ = ["BackoffConfig", "DEFAULT_BACKOFF_CONFIG", "backoff", "with_backoff"]
