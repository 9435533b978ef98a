"""Image I/O layer for voronoizer.

This module handles writing rendered buffers to disk as binary PPM (P6)
images and reading them back.

Key responsibilities:
- Encode packed colors as three bytes per pixel
- Report unwritable destinations as ImageWriteError
- Decode P6 files for verification

Key classes and functions:
- PPMWriter / write_ppm: Save buffers
- read_ppm / decode_ppm: Load buffers
"""

from voronoizer.io.reader import decode_ppm, read_ppm
from voronoizer.io.writer import PPMWriter, encode_ppm, write_ppm

__all__ = [
    "PPMWriter",
    "decode_ppm",
    "encode_ppm",
    "read_ppm",
    "write_ppm",
]
