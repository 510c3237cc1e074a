"""Configuration for the provider layer.

Exposes the settings loader and the env helpers. Adapter defaults live in
``config.defaults`` and are imported directly by the adapters.
"""

from .env import is_placeholder, merged_environment, parse_dotenv
from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings", "is_placeholder", "merged_environment", "parse_dotenv"]
