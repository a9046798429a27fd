"""Core: configuration and application bootstrap.

Single place for settings.
"""

from registry.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
