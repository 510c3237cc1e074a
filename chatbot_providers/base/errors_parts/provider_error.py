"""
Structured provider error exception types.

`ProviderError` wraps transport and backend failures with a normalized
`ErrorCode`. `ConfigurationError` is the fatal, pre-network variant raised
when an adapter is constructed without a required field.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"ollama"``).
        model: Optional model name associated with the failure.
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"

    @property
    def is_timeout(self) -> bool:
        return self.code is ErrorCode.TIMEOUT


@dataclass
class ConfigurationError(ProviderError):
    """A required configuration field is missing or malformed.

    Raised synchronously at adapter construction or settings load time,
    before any network call is attempted.
    """

    code: ErrorCode = ErrorCode.CONFIGURATION
    message: str = "invalid configuration"
    provider: str = "unknown"
    field: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        suffix = f" (field: {self.field})" if self.field else ""
        return f"{self.provider} configuration error: {self.message}{suffix}"


__all__ = ["ProviderError", "ConfigurationError"]
