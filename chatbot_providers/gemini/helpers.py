"""Gemini helpers module.

Pure helpers for the Gemini adapter: request content shaping, model name
qualification, and response extraction. No SDK calls happen here so the
adapter can be tested against a fake ``genai`` module.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..base.errors import ErrorCode, ProviderError
from ..base.models import WireMessage

_MODEL_PREFIX = "models/"


def build_contents(messages: Sequence[WireMessage]) -> List[Dict[str, Any]]:
    """Translate gemini-dialect messages into SDK ``contents`` entries."""
    return [{"role": m.role, "parts": [{"text": m.content}]} for m in messages]


def qualify_model_name(model: str) -> str:
    """Return ``model`` with the ``models/`` prefix the embedding API expects."""
    return model if model.startswith(_MODEL_PREFIX) else f"{_MODEL_PREFIX}{model}"


def extract_text(response: Any) -> str:
    """Best-effort extraction of text from a ``generate_content`` response.

    Reads ``response.text`` first and falls back to concatenating the parts of
    the first candidate. The ``text`` accessor raises ``ValueError`` when the
    candidate was blocked; that case yields an empty string, which the chat
    base treats as a failure.
    """
    try:
        text = getattr(response, "text", None)
    except ValueError:
        text = None
    if isinstance(text, str) and text:
        return text
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    return "".join(getattr(p, "text", "") or "" for p in parts)


def extract_embedding(result: Any, *, model: str) -> List[float]:
    """Return the vector from an ``embed_content`` result mapping."""
    vector = result.get("embedding") if isinstance(result, dict) else getattr(result, "embedding", None)
    if not vector:
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message="invalid response from Gemini API: missing embedding",
            provider="gemini",
            model=model,
            retryable=True,
        )
    return list(vector)


__all__ = ["build_contents", "qualify_model_name", "extract_text", "extract_embedding"]
