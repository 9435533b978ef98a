"""Dense in-memory pixel storage.

PixelBuffer owns a (height, width) uint32 numpy array. Indexing is row-major
everywhere: the first array index is the row (y), the second the column (x).
"""

import numpy as np

from voronoizer.domain.color import Color


class PixelBuffer:
    """A width x height grid of packed colors.

    Single-pixel accessors are only defined inside the buffer; callers clip
    before calling. Out-of-range access trips an assertion.

    Example:
        buffer = PixelBuffer(1000, 1000)
        buffer.fill(COLOR_BACKGROUND)
        buffer.set(10, 20, COLOR_RED)
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a zeroed buffer.

        Args:
            width: Number of columns
            height: Number of rows
        """
        assert width > 0 and height > 0, f"invalid buffer size {width}x{height}"
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width), dtype=np.uint32)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> np.ndarray:
        """Underlying (height, width) array, shared not copied."""
        return self._pixels

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a pixel of this buffer."""
        return 0 <= x < self._width and 0 <= y < self._height

    def fill(self, color: Color) -> None:
        """Set every pixel to ``color``."""
        self._pixels.fill(color)

    def set(self, x: int, y: int, color: Color) -> None:
        assert self.contains(x, y), f"pixel ({x}, {y}) out of bounds"
        self._pixels[y, x] = color

    def get(self, x: int, y: int) -> Color:
        assert self.contains(x, y), f"pixel ({x}, {y}) out of bounds"
        return int(self._pixels[y, x])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return bool(np.array_equal(self._pixels, other._pixels))

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self._width}, height={self._height})"
