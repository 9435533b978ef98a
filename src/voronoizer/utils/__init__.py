"""Utility functions for voronoizer.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics and event logging
"""

from voronoizer.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
