"""Utility modules for the LaunchIn7 site scanner."""

from .config import Settings, get_settings
from .domain import normalize_domain, is_valid_url

__all__ = [
    "Settings",
    "get_settings",
    "normalize_domain",
    "is_valid_url",
]
