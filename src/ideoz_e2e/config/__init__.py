"""Configuration module for the Ideoz E2E suite.

Usage:
    from ideoz_e2e.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.base_url)

Note:
    Use `get_settings()` rather than a module-level instance so that tests
    can patch the environment and call `get_settings.cache_clear()`.
"""

from ideoz_e2e.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
