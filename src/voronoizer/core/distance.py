"""Distance metrics for nearest-seed classification.

Each metric has a scalar form over Points and a vectorized form that scores
one pixel row against every seed at once. Both return integers, so ties are
exact.
"""

from collections.abc import Callable

import numpy as np

from voronoizer.config import DistanceMetric
from voronoizer.domain.point import Point


def squared_euclidean(a: Point, b: Point) -> int:
    """Squared Euclidean distance between two points."""
    return a.squared_distance(b)


def manhattan(a: Point, b: Point) -> int:
    """Manhattan distance between two points."""
    return a.manhattan_distance(b)


def _row_squared_euclidean(dx: np.ndarray, dy: np.ndarray) -> np.ndarray:
    return dx * dx + dy * dy


def _row_manhattan(dx: np.ndarray, dy: np.ndarray) -> np.ndarray:
    return np.abs(dx) + np.abs(dy)


SCALAR_METRICS: dict[DistanceMetric, Callable[[Point, Point], int]] = {
    DistanceMetric.EUCLIDEAN: squared_euclidean,
    DistanceMetric.MANHATTAN: manhattan,
}

_ROW_METRICS: dict[DistanceMetric, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    DistanceMetric.EUCLIDEAN: _row_squared_euclidean,
    DistanceMetric.MANHATTAN: _row_manhattan,
}


def row_distances(
    y: int,
    width: int,
    seeds: np.ndarray,
    metric: DistanceMetric = DistanceMetric.EUCLIDEAN,
) -> np.ndarray:
    """Distances from every pixel of row ``y`` to every seed.

    Args:
        y: Row index
        width: Row length in pixels
        seeds: (N, 2) int64 array of (x, y) seed coordinates
        metric: Distance metric

    Returns:
        (width, N) int64 array; entry [x, i] is the distance from (x, y) to seed i
    """
    xs = np.arange(width, dtype=np.int64)
    dx = xs[:, np.newaxis] - seeds[np.newaxis, :, 0]
    dy = np.broadcast_to(y - seeds[:, 1], dx.shape)
    return _ROW_METRICS[metric](dx, dy)
