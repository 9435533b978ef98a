"""Logging utilities for Voronoizer."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so reconfiguration replaces them
_HANDLER_TAG = "_voronoizer_handler"


@dataclass
class RenderStats:
    """Statistics from a render run."""

    width: int = 0
    height: int = 0
    seed_count: int = 0
    marker_pixels: int = 0
    region_time_ms: float = 0.0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _install_handler(root_logger: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG, True)
    root_logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, log records never reach the console

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    # Keeps records away from logging.lastResort when no other handler is installed
    _install_handler(root_logger, logging.NullHandler())

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _install_handler(root_logger, file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        _install_handler(root_logger, console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("voronoizer")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for render pipeline events."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger

    def log_seeds_generated(self, count: int, random_seed: int | None) -> None:
        """Log seed placement."""
        self._logger.info(
            "Seeds generated",
            count=count,
            random_seed=random_seed,
            reproducible=random_seed is not None,
        )

    def log_regions_rendered(
        self,
        seed_count: int,
        metric: str,
        workers: int,
        duration_ms: float,
    ) -> None:
        """Log region classification."""
        self._logger.info(
            "Regions rendered",
            seeds=seed_count,
            metric=metric,
            workers=workers,
            duration_ms=round(duration_ms, 2),
        )

    def log_markers_rendered(self, radius: int, painted: int) -> None:
        """Log marker overlay."""
        self._logger.debug("Markers rendered", radius=radius, painted=painted)

    def log_image_written(self, path: str, width: int, height: int, size_bytes: int) -> None:
        """Log a completed image write."""
        self._logger.info(
            "Image written",
            output=path,
            width=width,
            height=height,
            size_bytes=size_bytes,
        )

    def log_write_error(self, path: str, error: Exception) -> None:
        """Log a failed image write."""
        self._logger.error(
            "Image write failed",
            output=path,
            error=str(error),
            error_type=type(error).__name__,
        )
