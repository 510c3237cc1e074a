"""DTO package exposing typed configuration objects."""

from .provider_config import ProviderConfig

__all__ = ["ProviderConfig"]
