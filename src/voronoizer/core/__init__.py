"""Core rendering algorithms for voronoizer.

This module contains the core algorithms for:

- Pixel storage (dense row-major buffer)
- Raster primitives (clipped filled discs)
- Distance metrics (squared Euclidean, Manhattan)
- Nearest-seed classification and marker overlay

All classification helpers are designed to be:
- Stateless (safe for use in worker processes)
- Deterministic (same seeds, same pixels)

Key functions:
- fill_disc: Paint a clipped filled disc
- nearest_seed_index: Scalar nearest-seed search with first-wins ties
- classify_band: Vectorized nearest-seed search over a band of rows
- render_seed_markers: Stamp markers at every seed

Key classes:
- PixelBuffer: Width x height grid of packed colors
- VoronoiRenderer: Full render pipeline
"""

from voronoizer.core.buffer import PixelBuffer
from voronoizer.core.distance import manhattan, row_distances, squared_euclidean
from voronoizer.core.raster import fill_disc
from voronoizer.core.renderer import (
    VoronoiRenderer,
    classify_band,
    nearest_seed_index,
    render_seed_markers,
)

__all__ = [
    # Buffer
    "PixelBuffer",
    # Renderer
    "VoronoiRenderer",
    "classify_band",
    # Raster
    "fill_disc",
    # Distance
    "manhattan",
    "nearest_seed_index",
    "render_seed_markers",
    "row_distances",
    "squared_euclidean",
]
