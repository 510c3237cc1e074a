"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `chatbot_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ConfigurationError, ProviderError
from .classification import RETRYABLE_CODES, classify_exception, wrap_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "RETRYABLE_CODES",
    "classify_exception",
    "wrap_exception",
]
