"""Integer raster coordinates.

This module defines the Point type shared by seeds, pixels and disc centers.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A pixel coordinate or seed location.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: Column index (0 = left edge)
        y: Row index (0 = top edge)
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def squared_distance(self, other: "Point") -> int:
        """Squared Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def manhattan_distance(self, other: "Point") -> int:
        """Manhattan (taxicab) distance to another point."""
        return abs(self.x - other.x) + abs(self.y - other.y)

