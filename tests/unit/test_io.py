"""Unit tests for the image I/O layer.

Tests for PPMWriter, write_ppm and the P6 reader.
"""

import io
from pathlib import Path
from unittest.mock import patch

import numpy as np
import pytest
from PIL import Image

from voronoizer.core.buffer import PixelBuffer
from voronoizer.domain import COLOR_BACKGROUND, COLOR_BLUE, COLOR_GREEN, COLOR_RED
from voronoizer.exceptions import ImageReadError, ImageWriteError
from voronoizer.io.reader import decode_ppm, read_ppm
from voronoizer.io.writer import PPMWriter, encode_ppm, pixel_bytes, ppm_header, write_ppm


@pytest.fixture
def small_buffer() -> PixelBuffer:
    """3x2 buffer with distinct pixels."""
    buffer = PixelBuffer(3, 2)
    buffer.set(0, 0, COLOR_RED)
    buffer.set(1, 0, COLOR_GREEN)
    buffer.set(2, 0, COLOR_BLUE)
    buffer.set(0, 1, COLOR_BACKGROUND)
    buffer.set(1, 1, 0x12345678)
    buffer.set(2, 1, 0x00020002)
    return buffer


class TestEncoding:
    """Tests for the P6 encoding."""

    def test_header(self):
        assert ppm_header(1000, 1000) == b"P6\n1000 1000 255\n"
        assert ppm_header(3, 2) == b"P6\n3 2 255\n"

    def test_pixel_bytes_order(self, small_buffer):
        """Row-major, three low bytes per pixel, least significant first."""
        assert pixel_bytes(small_buffer) == (
            b"\xff\x00\x00"
            b"\x00\xff\x00"
            b"\x00\x00\xff"
            b"\x17\x17\x20"
            b"\x78\x56\x34"
            b"\x02\x00\x02"
        )

    def test_encode_length(self, small_buffer):
        data = encode_ppm(small_buffer)
        assert data.startswith(b"P6\n3 2 255\n")
        assert len(data) == len(b"P6\n3 2 255\n") + 3 * 2 * 3

    def test_non_square_rows_first(self):
        """Row 0 is emitted completely before row 1."""
        buffer = PixelBuffer(2, 3)
        buffer.set(1, 0, 0x000001)
        buffer.set(0, 1, 0x000002)
        payload = pixel_bytes(buffer)
        assert payload[3] == 1
        assert payload[6] == 2


class TestPPMWriter:
    """Tests for PPMWriter class."""

    def test_write(self, tmp_path, small_buffer):
        path = tmp_path / "out.ppm"
        written = PPMWriter(path).write(small_buffer)

        assert path.read_bytes() == encode_ppm(small_buffer)
        assert written == path.stat().st_size

    def test_write_ppm_function(self, tmp_path, small_buffer):
        path = tmp_path / "out.ppm"
        write_ppm(small_buffer, path)
        assert path.exists()

    def test_missing_directory(self, tmp_path, small_buffer):
        path = tmp_path / "missing" / "out.ppm"
        with pytest.raises(ImageWriteError) as exc_info:
            write_ppm(small_buffer, path)

        assert exc_info.value.path == str(path)
        assert "No such file or directory" in exc_info.value.reason
        assert str(path) in str(exc_info.value)

    def test_os_error_reported(self, tmp_path, small_buffer):
        path = tmp_path / "out.ppm"
        with patch("builtins.open", side_effect=OSError(28, "No space left on device")):
            with pytest.raises(ImageWriteError, match="No space left on device"):
                PPMWriter(path).write(small_buffer)


class TestPPMReader:
    """Tests for the P6 reader."""

    def test_round_trip_low_24_bits(self, tmp_path, small_buffer):
        path = tmp_path / "out.ppm"
        write_ppm(small_buffer, path)
        loaded = read_ppm(path)

        assert loaded.width == 3
        assert loaded.height == 2
        assert np.array_equal(loaded.pixels, small_buffer.pixels & 0x00FFFFFF)

    def test_header_comments(self):
        data = b"P6\n# made by hand\n1 1\n255\n\x01\x02\x03"
        buffer = decode_ppm(data)
        assert buffer.get(0, 0) == 0x030201

    def test_pillow_decodes_written_file(self, tmp_path, small_buffer):
        """A third-party decoder sees the same RGB triples the writer emits."""
        path = tmp_path / "out.ppm"
        write_ppm(small_buffer, path)

        with Image.open(path) as image:
            assert image.format == "PPM"
            assert image.size == (3, 2)
            assert image.convert("RGB").getpixel((1, 1)) == (0x78, 0x56, 0x34)
            assert image.convert("RGB").getpixel((0, 0)) == (0xFF, 0x00, 0x00)

    def test_not_an_image(self):
        with pytest.raises(ImageReadError):
            decode_ppm(b"this is not an image")

    def test_other_format_rejected(self):
        png = io.BytesIO()
        Image.new("RGB", (2, 2)).save(png, format="PNG")
        with pytest.raises(ImageReadError, match="not a PPM image"):
            decode_ppm(png.getvalue())

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageReadError):
            read_ppm(Path(tmp_path / "nope.ppm"))
