"""Voronoi rendering pipeline.

This module classifies every pixel of a buffer by its nearest seed and
overlays seed markers. Rows are independent, so classification can be
split into row bands and run on a ProcessPoolExecutor.

Key components:
- nearest_seed_index: Reference scalar nearest-seed search
- classify_band: Top-level picklable function for parallel execution
- VoronoiRenderer: Orchestrates background fill, regions and markers
"""

import time
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

import numpy as np

from voronoizer.config import DistanceMetric, VoronoizerSettings
from voronoizer.core.buffer import PixelBuffer
from voronoizer.core.distance import SCALAR_METRICS, row_distances
from voronoizer.core.raster import fill_disc
from voronoizer.domain.color import Color, seed_to_color
from voronoizer.domain.point import Point
from voronoizer.domain.seeds import SeedSet, make_rng
from voronoizer.utils import RenderLogger, RenderStats, configure_logging


def nearest_seed_index(
    point: Point,
    seeds: SeedSet,
    metric: DistanceMetric = DistanceMetric.EUCLIDEAN,
) -> int:
    """Find the seed closest to ``point``.

    The running best is only replaced on a strictly smaller distance, so
    among equally close seeds the earliest one wins.

    Args:
        point: Pixel to classify
        seeds: Candidate seeds (N >= 1)
        metric: Distance metric

    Returns:
        Index into ``seeds`` of the nearest seed
    """
    distance = SCALAR_METRICS[metric]
    best_idx = 0
    best_dist = distance(seeds[0], point)

    for idx in range(1, len(seeds)):
        dist = distance(seeds[idx], point)
        if dist < best_dist:
            best_idx = idx
            best_dist = dist

    return best_idx


def classify_band(
    seed_coords: list[tuple[int, int]],
    width: int,
    row_start: int,
    row_stop: int,
    metric_value: str,
) -> dict[str, Any]:
    """Classify rows [row_start, row_stop) by nearest seed.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor. Takes plain data only.

    np.argmin returns the first minimum, which keeps the earliest seed on
    ties exactly like nearest_seed_index.

    Args:
        seed_coords: Seeds as (x, y) tuples in classification order
        width: Row length in pixels
        row_start: First row of the band
        row_stop: One past the last row of the band
        metric_value: DistanceMetric value string

    Returns:
        {"row_start": int, "indices": (rows, width) int array,
         "duration_ms": float}
    """
    start_time = time.time()

    seeds = np.array(seed_coords, dtype=np.int64).reshape(-1, 2)
    metric = DistanceMetric(metric_value)
    indices = np.empty((row_stop - row_start, width), dtype=np.int64)

    for offset, y in enumerate(range(row_start, row_stop)):
        distances = row_distances(y, width, seeds, metric)
        indices[offset] = np.argmin(distances, axis=1)

    return {
        "row_start": row_start,
        "indices": indices,
        "duration_ms": (time.time() - start_time) * 1000,
    }


def _split_rows(height: int, bands: int) -> list[tuple[int, int]]:
    """Split [0, height) into at most ``bands`` contiguous row ranges."""
    bands = max(1, min(bands, height))
    step, extra = divmod(height, bands)
    ranges = []
    start = 0
    for band in range(bands):
        stop = start + step + (1 if band < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


class VoronoiRenderer:
    """Renders Voronoi diagrams into pixel buffers.

    Manages the complete workflow:
    1. Fill the buffer with the background color
    2. Classify every pixel by nearest seed (sequential or in row bands)
    3. Paint each pixel with its seed's color
    4. Overlay a marker disc at every seed, in seed order

    Example:
        settings = VoronoizerSettings()
        renderer = VoronoiRenderer(settings)
        seeds = renderer.generate_seeds()
        buffer, stats = renderer.render(seeds)
    """

    # Rows per task when running in parallel
    BANDS_PER_WORKER = 4

    # Rows per progress update on the sequential path
    SEQUENTIAL_CHUNK_ROWS = 16

    def __init__(self, config: VoronoizerSettings) -> None:
        """Initialize renderer with configuration.

        Args:
            config: Voronoizer settings
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=not config.logging.console_output,
        )
        self.render_logger = RenderLogger(self.logger)

    def generate_seeds(self, rng: np.random.Generator | None = None) -> SeedSet:
        """Scatter the configured number of seeds over the canvas.

        Args:
            rng: Generator to draw from (default: built from seeds.random_seed)

        Returns:
            Freshly generated SeedSet
        """
        if rng is None:
            rng = make_rng(self.config.seeds.random_seed)

        canvas = self.config.canvas
        seeds = SeedSet.generate_random(
            count=self.config.seeds.count,
            width=canvas.width,
            height=canvas.height,
            rng=rng,
        )
        self.render_logger.log_seeds_generated(
            count=len(seeds),
            random_seed=self.config.seeds.random_seed,
        )
        return seeds

    def render(
        self,
        seeds: SeedSet,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> tuple[PixelBuffer, RenderStats]:
        """Render a complete diagram.

        Args:
            seeds: Seeds inside the configured canvas
            max_workers: Worker processes (None = config default, 1 = sequential)
            progress_callback: Optional callback(rows_done, total_rows)

        Returns:
            Tuple of (rendered buffer, render statistics)
        """
        canvas = self.config.canvas
        stats = RenderStats(
            width=canvas.width,
            height=canvas.height,
            seed_count=len(seeds),
        )
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.render.max_workers

        buffer = PixelBuffer(canvas.width, canvas.height)
        buffer.fill(canvas.background_color)

        region_start = time.time()
        self.render_regions(
            buffer,
            seeds,
            max_workers=max_workers,
            progress_callback=progress_callback,
        )
        stats.region_time_ms = (time.time() - region_start) * 1000
        self.render_logger.log_regions_rendered(
            seed_count=len(seeds),
            metric=self.config.render.metric.value,
            workers=max_workers or 1,
            duration_ms=stats.region_time_ms,
        )

        marker = self.config.marker
        stats.marker_pixels = render_seed_markers(buffer, seeds, marker.radius, marker.color)
        self.render_logger.log_markers_rendered(
            radius=marker.radius,
            painted=stats.marker_pixels,
        )

        stats.end_time = time.time()
        return buffer, stats

    def render_regions(
        self,
        buffer: PixelBuffer,
        seeds: SeedSet,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> None:
        """Paint every pixel with the color of its nearest seed.

        Args:
            buffer: Target buffer, overwritten completely
            seeds: Seeds to classify against
            max_workers: Worker processes (None or 1 = sequential)
            progress_callback: Optional callback(rows_done, total_rows)
        """
        colors = np.array([seed_to_color(p) for p in seeds], dtype=np.uint32)
        seed_coords = [p.to_tuple() for p in seeds]
        metric = self.config.render.metric.value

        if max_workers is None or max_workers <= 1:
            for row_start in range(0, buffer.height, self.SEQUENTIAL_CHUNK_ROWS):
                row_stop = min(row_start + self.SEQUENTIAL_CHUNK_ROWS, buffer.height)
                result = classify_band(
                    seed_coords, buffer.width, row_start, row_stop, metric
                )
                buffer.pixels[row_start:row_stop] = colors[result["indices"]]
                if progress_callback is not None:
                    progress_callback(row_stop, buffer.height)
            return

        self._render_regions_parallel(
            buffer, seed_coords, colors, metric, max_workers, progress_callback
        )

    def _render_regions_parallel(
        self,
        buffer: PixelBuffer,
        seed_coords: list[tuple[int, int]],
        colors: np.ndarray,
        metric: str,
        max_workers: int,
        progress_callback: Callable[[int, int], None] | None,
    ) -> None:
        """Classify row bands on a process pool and stitch them into the buffer."""
        bands = _split_rows(buffer.height, max_workers * self.BANDS_PER_WORKER)

        self.logger.info(
            "Starting parallel rendering",
            bands=len(bands),
            max_workers=max_workers,
        )

        rows_done = 0
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(
                    classify_band, seed_coords, buffer.width, start, stop, metric
                )
                for start, stop in bands
            ]

            try:
                for future in as_completed(futures):
                    result = future.result()
                    indices = result["indices"]
                    row_start = result["row_start"]
                    row_stop = row_start + indices.shape[0]
                    buffer.pixels[row_start:row_stop] = colors[indices]

                    self.logger.debug(
                        "Band rendered",
                        row_start=row_start,
                        row_stop=row_stop,
                        duration_ms=round(result["duration_ms"], 2),
                    )
                    rows_done += indices.shape[0]
                    if progress_callback is not None:
                        progress_callback(rows_done, buffer.height)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                executor.shutdown(wait=True, cancel_futures=True)
                raise


def render_seed_markers(
    buffer: PixelBuffer,
    seeds: SeedSet,
    radius: int,
    color: Color,
) -> int:
    """Stamp a filled disc at every seed, in seed order.

    Later markers overwrite earlier ones where they overlap.

    Returns:
        Total number of pixel writes
    """
    painted = 0
    for seed in seeds:
        painted += fill_disc(buffer, seed, radius, color)
    return painted
