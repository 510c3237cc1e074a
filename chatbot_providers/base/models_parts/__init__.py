"""Model parts package; prefer importing from ``chatbot_providers.base.models``."""

from .message import ROLES, Message, Role, WireMessage
from .results import ChatResult, EmbedResult

__all__ = ["Message", "WireMessage", "Role", "ROLES", "ChatResult", "EmbedResult"]
