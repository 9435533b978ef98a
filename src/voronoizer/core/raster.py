"""Raster primitives that draw into a PixelBuffer."""

from voronoizer.core.buffer import PixelBuffer
from voronoizer.domain.color import Color
from voronoizer.domain.point import Point


def fill_disc(buffer: PixelBuffer, center: Point, radius: int, color: Color) -> int:
    """Paint a filled disc, clipped to the buffer.

    Candidates come from the half-open square
    [cx - r, cx + r) x [cy - r, cy + r); a candidate is painted when
    dx^2 + dy^2 <= r^2. The half-open bound means radius 0 paints nothing
    and the right and bottom rims of the disc are left out.

    Args:
        buffer: Target buffer
        center: Disc center; may lie anywhere, including off-buffer
        radius: Disc radius in pixels (>= 0)
        color: Packed color to paint

    Returns:
        Number of pixels painted
    """
    assert radius >= 0, f"negative radius: {radius}"

    radius_sq = radius * radius
    painted = 0

    for x in range(center.x - radius, center.x + radius):
        if not 0 <= x < buffer.width:
            continue
        for y in range(center.y - radius, center.y + radius):
            if not 0 <= y < buffer.height:
                continue
            dx = x - center.x
            dy = y - center.y
            if dx * dx + dy * dy <= radius_sq:
                buffer.set(x, y, color)
                painted += 1

    return painted
