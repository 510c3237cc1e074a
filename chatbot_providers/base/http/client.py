"""Async JSON-over-HTTP helper for HTTP-based provider adapters.

Purpose:
    Issue a POST with a JSON body and return the decoded JSON body, raising
    on transport failures and non-2xx statuses. Adapters call this instead of
    touching ``httpx`` directly so request shaping and error surfaces stay
    uniform.

External dependencies:
    - ``httpx`` (``AsyncClient``).

Lifecycle:
    A short-lived ``AsyncClient`` is opened per call. Async clients are bound
    to the event loop that created them, so per-call clients keep concurrent
    requests independent without any shared pool or lock. Tests inject an
    ``httpx.MockTransport`` through the ``transport`` argument.

Timeout strategy:
    ``timeout`` is applied as the httpx request timeout; callers additionally
    wrap the call in ``with_timeout`` for an end-to-end deadline.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx


async def post_json(
    url: str,
    payload: Mapping[str, Any],
    *,
    timeout: Optional[float] = None,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """POST ``payload`` as JSON to ``url`` and return the parsed JSON response.

    Parameters:
        url: Absolute endpoint URL.
        payload: JSON-serializable request body.
        timeout: Request timeout in seconds; ``None`` or ``<= 0`` disables it.
        headers: Optional extra headers.
        transport: Optional transport override (tests, proxies).

    Returns:
        The decoded JSON body.

    Raises:
        httpx.HTTPStatusError: Non-2xx response.
        httpx.TransportError: Connection, read, or timeout failures.
        ValueError: The body is not valid JSON.
    """
    if timeout is not None and timeout <= 0:
        timeout = None
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        resp = await client.post(url, json=dict(payload), headers=dict(headers or {}))
        resp.raise_for_status()
        return resp.json()


def join_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path`` with exactly one slash between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


__all__ = ["post_json", "join_url"]
