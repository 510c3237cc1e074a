"""Message normalization for backend dialects.

Converts a provider-agnostic conversation into the role vocabulary a given
backend understands. Dialect behavior is table-driven (:data:`DIALECTS`):

- ``supports_system_role``: when ``False`` every system message is removed
  and its text is merged into the first user message as
  ``"[System Instructions: <joined>]\\n\\n<user text>"``, where ``<joined>``
  is the system contents in original order separated by a blank line. With
  no user message present the system text is dropped.
- ``role_map``: role renames applied to the remaining messages; roles not in
  the map pass through unchanged.

Everything here is pure: inputs are never mutated and identical inputs give
identical outputs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Protocol, Sequence

from ..models import WireMessage

SYSTEM_SEPARATOR = "\n\n"
SYSTEM_INSTRUCTIONS_TEMPLATE = "[System Instructions: {text}]\n\n{content}"


class _RoleContent(Protocol):
    role: str
    content: str


@dataclass(frozen=True)
class Dialect:
    """Role handling rules for one backend wire format."""

    name: str
    supports_system_role: bool = True
    role_map: Mapping[str, str] = field(default_factory=dict)


DIALECTS: Dict[str, Dialect] = {
    "chat": Dialect(name="chat"),
    "ollama": Dialect(
        name="ollama",
        role_map={"system": "System", "user": "User", "assistant": "Assistant"},
    ),
    "gemini": Dialect(
        name="gemini",
        supports_system_role=False,
        role_map={"assistant": "model"},
    ),
}


def get_dialect(name: str) -> Dialect:
    """Return the dialect registered under ``name``.

    Raises:
        ValueError: When the dialect is unknown.
    """
    try:
        return DIALECTS[name]
    except KeyError:
        raise ValueError(f"unknown message dialect {name!r}; known: {', '.join(sorted(DIALECTS))}") from None


def normalize(messages: Sequence[_RoleContent], dialect: str | Dialect) -> List[WireMessage]:
    """Translate ``messages`` into ``dialect``'s wire roles.

    Parameters:
        messages: Ordered conversation (``Message`` or ``WireMessage`` items).
        dialect: Dialect name or instance.

    Returns:
        A new list of :class:`WireMessage`.
    """
    spec = dialect if isinstance(dialect, Dialect) else get_dialect(dialect)

    if spec.supports_system_role:
        return [WireMessage(role=spec.role_map.get(m.role, m.role), content=m.content) for m in messages]

    system_texts = [m.content for m in messages if m.role == "system"]
    rest = [m for m in messages if m.role != "system"]
    out = [WireMessage(role=spec.role_map.get(m.role, m.role), content=m.content) for m in rest]
    if system_texts:
        joined = SYSTEM_SEPARATOR.join(system_texts)
        for idx, original in enumerate(rest):
            if original.role == "user":
                out[idx] = WireMessage(
                    role=out[idx].role,
                    content=SYSTEM_INSTRUCTIONS_TEMPLATE.format(text=joined, content=original.content),
                )
                break
    return out


def render_transcript(messages: Sequence[_RoleContent], *, reply_label: str = "Assistant") -> str:
    """Flatten labelled messages into a single completion prompt.

    Each message becomes ``"<role>: <content>"`` followed by a blank line and
    the prompt ends with ``"<reply_label>: "`` as the completion cue.
    """
    prompt = "".join(f"{m.role}: {m.content}\n\n" for m in messages)
    return f"{prompt}{reply_label}: "


def last_user_content(messages: Sequence[_RoleContent]) -> str:
    """Return the content of the last ``user`` message, or an empty string."""
    for m in reversed(messages):
        if m.role == "user":
            return m.content
    return ""


__all__ = [
    "Dialect",
    "DIALECTS",
    "get_dialect",
    "normalize",
    "render_transcript",
    "last_user_content",
    "SYSTEM_SEPARATOR",
]
