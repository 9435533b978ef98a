"""PPM writer for rendered buffers.

This module serializes a PixelBuffer as a binary PPM (P6) image: an ASCII
header followed by three bytes per pixel, row-major, top row first.
"""

from pathlib import Path

import numpy as np

from voronoizer.core.buffer import PixelBuffer
from voronoizer.exceptions import ImageWriteError

PPM_MAGIC = b"P6"
PPM_MAX_VALUE = 255


def ppm_header(width: int, height: int) -> bytes:
    """Build the P6 header for a width x height image."""
    return PPM_MAGIC + b"\n" + f"{width} {height} {PPM_MAX_VALUE}\n".encode("ascii")


def pixel_bytes(buffer: PixelBuffer) -> bytes:
    """Raw pixel payload of a buffer.

    Each packed color contributes its three low-order bytes, least
    significant first. The top byte (alpha) is dropped.

    Args:
        buffer: Buffer to serialize

    Returns:
        width * height * 3 bytes
    """
    pixels = buffer.pixels
    channels = np.empty((buffer.height, buffer.width, 3), dtype=np.uint8)
    channels[..., 0] = pixels & 0xFF
    channels[..., 1] = (pixels >> 8) & 0xFF
    channels[..., 2] = (pixels >> 16) & 0xFF
    return channels.tobytes()


def encode_ppm(buffer: PixelBuffer) -> bytes:
    """Encode a buffer as a complete in-memory P6 image."""
    return ppm_header(buffer.width, buffer.height) + pixel_bytes(buffer)


class PPMWriter:
    """Writes rendered buffers to PPM files.

    Example:
        writer = PPMWriter(Path("output.ppm"))
        writer.write(buffer)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the image will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write(self, buffer: PixelBuffer) -> int:
        """Save the buffer to the output path.

        The header is only written once the destination is open.

        Args:
            buffer: Fully rendered buffer

        Returns:
            Number of bytes written

        Raises:
            ImageWriteError: If the file cannot be opened or written
        """
        payload = encode_ppm(buffer)

        try:
            with open(self._output_path, "wb") as file:
                file.write(payload)
        except OSError as e:
            raise ImageWriteError(str(self._output_path), e.strerror or str(e)) from e

        return len(payload)


def write_ppm(buffer: PixelBuffer, path: Path) -> int:
    """Write ``buffer`` to ``path`` as a P6 image.

    Raises:
        ImageWriteError: If the file cannot be opened or written
    """
    return PPMWriter(path).write(buffer)
