"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the implementations under ``chatbot_providers.base.models_parts``
to keep a single stable import path.
"""

from .models_parts.message import ROLES, Message, Role, WireMessage
from .models_parts.results import ChatResult, EmbedResult

__all__ = [
    "Message",
    "WireMessage",
    "Role",
    "ROLES",
    "ChatResult",
    "EmbedResult",
]
