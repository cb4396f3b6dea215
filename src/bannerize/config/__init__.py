"""Configuration management for bannerize.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Banner font layout settings
- LibraryConfig: Font directory and caching settings
- LoggingConfig: Logging settings
- BannerSettings: Main application settings
"""

from bannerize.config.settings import (
    BannerSettings,
    FontConfig,
    LibraryConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "BannerSettings",
    "FontConfig",
    "LibraryConfig",
    "LoggingConfig",
    "get_default_settings",
]
