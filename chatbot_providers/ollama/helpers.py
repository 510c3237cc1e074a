"""Ollama helpers module.

Side-effect-free utilities for the Ollama adapter: prompt rendering,
payload construction, and response parsing. Keeping them here leaves
``client.py`` focused on wiring.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..base.errors import ErrorCode, ProviderError
from ..base.models import WireMessage
from ..base.utils.messages import render_transcript


def build_prompt(messages: Sequence[WireMessage]) -> str:
    """Render ollama-dialect messages as a labelled transcript prompt.

    ``[System, User]`` becomes ``"System: ...\\n\\nUser: ...\\n\\nAssistant: "``.
    """
    return render_transcript(messages, reply_label="Assistant")


def build_generate_payload(*, model: str, prompt: str) -> Dict[str, Any]:
    """Construct the JSON payload for ``/api/generate`` (non-streaming)."""
    return {"model": model, "prompt": prompt, "stream": False}


def build_embeddings_payload(*, model: str, text: str) -> Dict[str, Any]:
    """Construct the JSON payload for ``/api/embeddings``."""
    return {"model": model, "prompt": text}


def parse_generate_response(data: Any, *, model: str) -> str:
    """Extract the completion text from a ``/api/generate`` body."""
    if not isinstance(data, dict) or not isinstance(data.get("response"), str):
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message="invalid response from Ollama API: missing response",
            provider="ollama",
            model=model,
        )
    return data["response"]


def parse_embeddings_response(data: Any, *, model: str) -> List[float]:
    """Extract the vector from a ``/api/embeddings`` body."""
    vector = data.get("embedding") if isinstance(data, dict) else None
    if not vector or not isinstance(vector, list):
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message="invalid response from Ollama API: missing embedding",
            provider="ollama",
            model=model,
            retryable=True,
        )
    return vector


__all__ = [
    "build_prompt",
    "build_generate_payload",
    "build_embeddings_payload",
    "parse_generate_response",
    "parse_embeddings_response",
]
