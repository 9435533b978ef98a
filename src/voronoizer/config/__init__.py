"""Configuration management for voronoizer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Image size and background
- SeedConfig: Seed count and generator seed
- MarkerConfig: Seed marker appearance
- RenderConfig: Distance metric and parallelism
- OutputConfig: Destination file
- LoggingConfig: Logging settings
- VoronoizerSettings: Main application settings
"""

from voronoizer.config.settings import (
    LOG_LEVELS,
    CanvasConfig,
    DistanceMetric,
    LoggingConfig,
    MarkerConfig,
    OutputConfig,
    RenderConfig,
    SeedConfig,
    VoronoizerSettings,
    get_default_settings,
)

__all__ = [
    "LOG_LEVELS",
    "CanvasConfig",
    "DistanceMetric",
    "LoggingConfig",
    "MarkerConfig",
    "OutputConfig",
    "RenderConfig",
    "SeedConfig",
    "VoronoizerSettings",
    "get_default_settings",
]
