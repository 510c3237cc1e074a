"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements httpx-aware transport detection, HTTP status extraction,
status-to-code mapping, and message-based heuristics as a fallback for SDK
exceptions that expose neither.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.code`` (google-api-core exceptions)
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "code"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

_PATTERN_GROUPS = (
    (ErrorCode.TIMEOUT, ("timeout", "timed out")),
    (ErrorCode.AUTH, ("api key", "unauthorized", "forbidden", "permission denied")),
    (ErrorCode.RATE_LIMIT, ("rate limit", "quota")),
    (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
    (ErrorCode.UNAVAILABLE, ("unavailable", "connection refused")),
    (ErrorCode.VALIDATION, ("invalid", "malformed", "missing")),
    (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for exceptions without structured status."""
    for code, patterns in _PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (builtin/asyncio/httpx).
        3. Cancellation.
        4. HTTP status mapping (httpx ``HTTPStatusError`` and SDK errors).
        5. Other httpx transport failures (connect/read/protocol).
        6. Substring heuristics.
        7. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, asyncio.CancelledError):
        return ErrorCode.CANCELLED
    status = _extract_status(exc)
    if status is not None:
        if status in _HTTP_STATUS_MAP:
            return _HTTP_STATUS_MAP[status]
        return ErrorCode.SERVER_ERROR if status >= 500 else ErrorCode.VALIDATION
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


RETRYABLE_CODES = (
    ErrorCode.TRANSIENT,
    ErrorCode.RATE_LIMIT,
    ErrorCode.TIMEOUT,
    ErrorCode.UNAVAILABLE,
    ErrorCode.SERVER_ERROR,
)


def wrap_exception(exc: BaseException, *, provider: str, model: Optional[str], message: Optional[str] = None) -> ProviderError:
    """Return ``exc`` as a :class:`ProviderError`, classifying foreign exceptions."""
    if isinstance(exc, ProviderError):
        return exc
    code = classify_exception(exc)
    return ProviderError(
        code=code,
        message=message or str(exc) or type(exc).__name__,
        provider=provider,
        model=model,
        retryable=code in RETRYABLE_CODES,
        raw=exc,
    )


__all__ = [
    "classify_exception",
    "wrap_exception",
    "RETRYABLE_CODES",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
