"""Configuration settings for Voronoizer."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from voronoizer.domain.color import COLOR_BACKGROUND, COLOR_BLACK

MAX_COLOR = 0xFFFFFFFF

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DistanceMetric(str, Enum):
    """Distance used to find the nearest seed."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"


class CanvasConfig(BaseModel):
    """Raster dimensions and background."""

    width: int = Field(
        default=1000,
        ge=1,
        le=65536,
        description="Image width in pixels",
    )
    height: int = Field(
        default=1000,
        ge=1,
        le=65536,
        description="Image height in pixels",
    )
    background_color: int = Field(
        default=COLOR_BACKGROUND,
        ge=0,
        le=MAX_COLOR,
        description="Packed 0xAABBGGRR color the buffer is filled with first",
    )


class SeedConfig(BaseModel):
    """Configuration for seed placement."""

    count: int = Field(
        default=50,
        ge=1,
        description="Number of seeds",
    )
    random_seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for the generator (None = non-reproducible)",
    )


class MarkerConfig(BaseModel):
    """Configuration for seed markers."""

    radius: int = Field(
        default=4,
        ge=0,
        le=1024,
        description="Marker disc radius in pixels (0 = no markers)",
    )
    color: int = Field(
        default=COLOR_BLACK,
        ge=0,
        le=MAX_COLOR,
        description="Packed 0xAABBGGRR marker color",
    )


class RenderConfig(BaseModel):
    """Configuration for region classification."""

    metric: DistanceMetric = Field(
        default=DistanceMetric.EUCLIDEAN,
        description="Distance metric for nearest-seed lookup",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker processes for row bands (None or 1 = sequential)",
    )


class OutputConfig(BaseModel):
    """Configuration for the output image."""

    path: Path = Field(
        default=Path("output.ppm"),
        description="Destination PPM file",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    console_output: bool = Field(
        default=False,
        description="Mirror log records to the console (stderr)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"unknown log level '{value}', expected one of {', '.join(LOG_LEVELS)}"
            )
        return level


class VoronoizerSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    seeds: SeedConfig = Field(default_factory=SeedConfig)
    marker: MarkerConfig = Field(default_factory=MarkerConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VoronoizerSettings:
    """Get default application settings."""
    return VoronoizerSettings()
