"""
Message DTO used across providers.

Defines the immutable `Message` dataclass and the `Role` literal. An ordered
list of messages forms a conversation; adapters never mutate the caller's
messages and instead produce dialect-specific `WireMessage` copies.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

# Message roles used across providers.
Role = Literal["system", "user", "assistant"]

ROLES: Tuple[str, ...] = ("system", "user", "assistant")


@dataclass(frozen=True)
class Message:
    """A provider-agnostic chat message.

    Attributes:
        role: ``"system"``, ``"user"``, or ``"assistant"``.
        content: Plain text content of the turn.

    Raises:
        ValueError: When ``role`` is not one of :data:`ROLES` or ``content``
            is not a string.
    """

    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"unsupported message role {self.role!r}; expected one of {', '.join(ROLES)}")
        if not isinstance(self.content, str):
            raise ValueError("message content must be a string")

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role="assistant", content=content)


@dataclass(frozen=True)
class WireMessage:
    """A message already translated into a backend dialect.

    ``role`` is whatever label the target backend expects (for example
    ``"model"`` for Gemini), so it is a plain string rather than a `Role`.
    """

    role: str
    content: str


__all__ = ["Message", "WireMessage", "Role", "ROLES"]
