"""HTTP helpers shared by HTTP-based adapters."""

from .client import join_url, post_json

__all__ = ["post_json", "join_url"]
