"""PPM reader.

This module loads PPM images back into a PixelBuffer, mainly to verify
rendered output. Decoding is done by Pillow.
"""

import io
from pathlib import Path
from typing import BinaryIO

import numpy as np
from PIL import Image, UnidentifiedImageError

from voronoizer.core.buffer import PixelBuffer
from voronoizer.exceptions import ImageReadError


def _load(fp: Path | BinaryIO, source: str) -> PixelBuffer:
    try:
        with Image.open(fp) as image:
            if image.format != "PPM":
                raise ImageReadError(source, f"not a PPM image ({image.format})")
            channels = np.asarray(image.convert("RGB"), dtype=np.uint32)
    except UnidentifiedImageError as e:
        raise ImageReadError(source, str(e)) from e
    except OSError as e:
        raise ImageReadError(source, e.strerror or str(e)) from e

    height, width = channels.shape[:2]
    buffer = PixelBuffer(width, height)
    buffer.pixels[...] = channels[..., 0] | (channels[..., 1] << 8) | (channels[..., 2] << 16)
    return buffer


def decode_ppm(data: bytes, source: str = "<memory>") -> PixelBuffer:
    """Decode an in-memory PPM image into a buffer.

    Pixels are reassembled as (b0 | b1 << 8 | b2 << 16); PPM has no alpha
    byte, so it comes back as zero.

    Args:
        data: Complete file contents
        source: Name used in error messages

    Returns:
        PixelBuffer with the decoded pixels

    Raises:
        ImageReadError: If the data is not a readable PPM image
    """
    return _load(io.BytesIO(data), source)


def read_ppm(path: Path) -> PixelBuffer:
    """Load a PPM image from disk.

    Raises:
        ImageReadError: If the file cannot be read or is not a PPM image
    """
    return _load(Path(path), str(path))
