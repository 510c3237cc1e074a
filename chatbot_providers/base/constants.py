"""Base shared constants for provider adapters.

Central location to avoid scattering user-facing strings and default
numbers across adapters.
"""
from __future__ import annotations

# Degraded chat answers (returned instead of raising)
TIMEOUT_APOLOGY = (
    "I apologize, but I'm having trouble processing your request at the moment. "
    "The response is taking longer than expected. Please try a simpler query or try again later."
)
ERROR_APOLOGY = "I apologize, but I'm experiencing technical difficulties at the moment. Please try again later."

# Shared resilience defaults (seconds)
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_STARTING_DELAY_SECONDS = 1.0
DEFAULT_MAX_DELAY_SECONDS = 5.0

# Prompt preview length for debug logs
PROMPT_PREVIEW_CHARS = 100

__all__ = [
    "TIMEOUT_APOLOGY",
    "ERROR_APOLOGY",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_STARTING_DELAY_SECONDS",
    "DEFAULT_MAX_DELAY_SECONDS",
    "PROMPT_PREVIEW_CHARS",
]
