"""
Outward-facing result DTOs.

`ChatResult` and `EmbedResult` are the only two shapes adapters return;
backend response objects are unpacked inside the adapter and discarded.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal


@dataclass(frozen=True)
class ChatResult:
    """Terminal value of a chat call: one complete assistant turn."""

    content: str
    role: Literal["assistant"] = "assistant"

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class EmbedResult:
    """Embedding vector for a single text.

    The length is fixed by the embedding model and is not validated here;
    the vector store's configured index is the authority on dimensionality.
    """

    embedding: List[float] = field(default_factory=list)

    @property
    def dimensions(self) -> int:
        return len(self.embedding)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ChatResult", "EmbedResult"]
