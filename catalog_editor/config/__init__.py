"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

This package provides:
- Environment-based configuration loading
- Type-safe settings with validation
- Singleton pattern for global access

Usage:
------
    from catalog_editor.config import get_settings, Settings

    settings = get_settings()
    print(settings.category_locale)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
