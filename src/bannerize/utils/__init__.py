"""Utility functions for bannerize.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics
"""

from bannerize.utils.logging import RenderStats, configure_logging

__all__ = [
    "RenderStats",
    "configure_logging",
]
