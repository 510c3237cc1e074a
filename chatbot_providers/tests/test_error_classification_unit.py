from __future__ import annotations

import asyncio

import httpx
import pytest

from chatbot_providers.base.errors import (
    ConfigurationError,
    ErrorCode,
    ProviderError,
    classify_exception,
    wrap_exception,
)


def _status_error(status: int) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "http://localhost:11434/api/generate")
    response = httpx.Response(status, request=request)
    return httpx.HTTPStatusError("status", request=request, response=response)


@pytest.mark.parametrize(
    "status,code",
    [
        (401, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (503, ErrorCode.UNAVAILABLE),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.VALIDATION),
    ],
)
def test_http_status_mapping(status, code):
    assert classify_exception(_status_error(status)) is code  # nosec B101


def test_timeouts():
    assert classify_exception(TimeoutError("x")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101


def test_transport_failure_is_transient():
    request = httpx.Request("POST", "http://localhost:11434")
    assert classify_exception(httpx.ConnectError("refused", request=request)) is ErrorCode.TRANSIENT  # nosec B101


def test_provider_error_passthrough_and_heuristics():
    err = ProviderError(code=ErrorCode.AUTH, message="nope", provider="gemini")
    assert classify_exception(err) is ErrorCode.AUTH  # nosec B101
    assert classify_exception(RuntimeError("Quota exceeded for project")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(RuntimeError("mystery")) is ErrorCode.UNKNOWN  # nosec B101


def test_wrap_exception_preserves_cause():
    cause = RuntimeError("Service Unavailable")
    err = wrap_exception(cause, provider="ollama", model="llama3")
    assert err.code is ErrorCode.UNAVAILABLE  # nosec B101
    assert err.retryable  # nosec B101
    assert err.raw is cause  # nosec B101
    assert "ollama" in str(err)  # nosec B101


def test_configuration_error_defaults():
    err = ConfigurationError(message="missing key", provider="gemini", field="api_key")
    assert err.code is ErrorCode.CONFIGURATION  # nosec B101
    assert isinstance(err, ProviderError)  # nosec B101
    assert "api_key" in str(err)  # nosec B101
