"""Core: configuration shared by every layer."""

from assoc_matchers.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
