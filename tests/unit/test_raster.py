"""Tests for raster primitives."""

import numpy as np

from voronoizer.core.buffer import PixelBuffer
from voronoizer.core.raster import fill_disc
from voronoizer.domain import COLOR_BLACK, Point

FILL = 0x00FFFFFF


def _painted(buffer: PixelBuffer) -> set[tuple[int, int]]:
    ys, xs = np.nonzero(buffer.pixels == COLOR_BLACK)
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


def _expected_disc(cx, cy, r, width, height):
    return {
        (x, y)
        for x in range(cx - r, cx + r)
        for y in range(cy - r, cy + r)
        if 0 <= x < width and 0 <= y < height and (x - cx) ** 2 + (y - cy) ** 2 <= r * r
    }


class TestFillDisc:
    """Tests for fill_disc."""

    def test_radius_zero_paints_nothing(self):
        buffer = PixelBuffer(100, 100)
        buffer.fill(FILL)
        painted = fill_disc(buffer, Point(50, 50), 0, COLOR_BLACK)
        assert painted == 0
        assert np.all(buffer.pixels == FILL)

    def test_radius_five(self):
        buffer = PixelBuffer(100, 100)
        buffer.fill(FILL)
        painted = fill_disc(buffer, Point(50, 50), 5, COLOR_BLACK)

        expected = _expected_disc(50, 50, 5, 100, 100)
        assert _painted(buffer) == expected
        assert painted == len(expected)

    def test_half_open_bounds(self):
        """The square is half-open: the left rim is painted, the right rim is not."""
        buffer = PixelBuffer(100, 100)
        buffer.fill(FILL)
        fill_disc(buffer, Point(50, 50), 5, COLOR_BLACK)

        assert buffer.get(45, 50) == COLOR_BLACK
        assert buffer.get(55, 50) == FILL
        assert buffer.get(50, 45) == COLOR_BLACK
        assert buffer.get(50, 55) == FILL
        assert buffer.get(50, 50) == COLOR_BLACK

    def test_radius_one_paints_center_and_upper_left_neighbours(self):
        buffer = PixelBuffer(10, 10)
        buffer.fill(FILL)
        fill_disc(buffer, Point(5, 5), 1, COLOR_BLACK)
        assert _painted(buffer) == {(4, 5), (5, 4), (5, 5)}

    def test_clipped_at_origin(self):
        buffer = PixelBuffer(20, 20)
        buffer.fill(FILL)
        painted = fill_disc(buffer, Point(0, 0), 4, COLOR_BLACK)

        expected = _expected_disc(0, 0, 4, 20, 20)
        assert _painted(buffer) == expected
        assert painted == len(expected)

    def test_clipped_at_far_corner(self):
        buffer = PixelBuffer(20, 15)
        buffer.fill(FILL)
        fill_disc(buffer, Point(19, 14), 4, COLOR_BLACK)
        assert _painted(buffer) == _expected_disc(19, 14, 4, 20, 15)

    def test_center_outside_buffer(self):
        """A disc centred off-buffer only paints the overlapping part."""
        buffer = PixelBuffer(10, 10)
        buffer.fill(FILL)
        fill_disc(buffer, Point(-2, 5), 4, COLOR_BLACK)
        assert _painted(buffer) == _expected_disc(-2, 5, 4, 10, 10)

    def test_disc_larger_than_buffer(self):
        buffer = PixelBuffer(4, 4)
        buffer.fill(FILL)
        painted = fill_disc(buffer, Point(2, 2), 50, COLOR_BLACK)
        assert painted == 16
        assert np.all(buffer.pixels == COLOR_BLACK)
