"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chatbot_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ConfigurationError, ProviderError
from .errors_parts.classification import RETRYABLE_CODES, classify_exception, wrap_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "RETRYABLE_CODES",
    "classify_exception",
    "wrap_exception",
]
