"""Seed sets for Voronoi rendering.

A SeedSet is the ordered, immutable list of points that define the regions
of a diagram. Order matters: when two seeds are equally close to a pixel,
the earlier seed owns it.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from voronoizer.domain.point import Point
from voronoizer.exceptions import SeedError


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the generator that drives seed placement.

    Args:
        seed: Explicit seed for reproducible runs, None to seed from OS entropy

    Returns:
        A freshly constructed numpy Generator owned by the caller
    """
    return np.random.default_rng(seed)


@dataclass(frozen=True)
class SeedSet:
    """Ordered collection of seed points.

    Attributes:
        points: Seeds in classification order
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.points) < 1:
            raise SeedError("at least one seed is required")

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    @classmethod
    def generate_random(
        cls,
        count: int,
        width: int,
        height: int,
        rng: np.random.Generator,
    ) -> "SeedSet":
        """Scatter seeds uniformly over a width x height raster.

        Each seed draws x from [0, width) and then y from [0, height).
        Coinciding seeds are allowed.

        Args:
            count: Number of seeds (N >= 1)
            width: Raster width in pixels
            height: Raster height in pixels
            rng: Generator to draw from; it is advanced, never reseeded

        Returns:
            SeedSet with exactly ``count`` points

        Raises:
            SeedError: If count is less than one
        """
        if count < 1:
            raise SeedError(f"seed count must be at least 1, got {count}")

        points = []
        for _ in range(count):
            x = int(rng.integers(0, width))
            y = int(rng.integers(0, height))
            points.append(Point(x, y))
        return cls(points=tuple(points))

    @classmethod
    def from_points(
        cls,
        points: Iterable[Point | tuple[int, int]],
        width: int,
        height: int,
    ) -> "SeedSet":
        """Build a seed set from explicit coordinates.

        Raises:
            SeedError: If the set is empty or a point lies outside the raster
        """
        seeds = tuple(p if isinstance(p, Point) else Point(*p) for p in points)
        for seed in seeds:
            if not (0 <= seed.x < width and 0 <= seed.y < height):
                raise SeedError(
                    f"seed ({seed.x}, {seed.y}) lies outside {width}x{height} raster"
                )
        return cls(points=seeds)

