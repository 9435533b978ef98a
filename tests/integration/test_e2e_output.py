"""End-to-end tests that render diagrams, write them and verify the files."""

import tempfile
from pathlib import Path

import numpy as np

from voronoizer.config import (
    CanvasConfig,
    MarkerConfig,
    SeedConfig,
    VoronoizerSettings,
    get_default_settings,
)
from voronoizer.core import VoronoiRenderer, nearest_seed_index
from voronoizer.domain import COLOR_BLACK, Point, SeedSet, seed_to_color
from voronoizer.io import encode_ppm, read_ppm, write_ppm


class TestEndToEndOutput:
    """Render, write and read back complete images."""

    def test_reference_scenario_file(self):
        """10x10 canvas with seeds (2,2) and (7,7)."""
        settings = VoronoizerSettings(
            canvas=CanvasConfig(width=10, height=10),
            marker=MarkerConfig(radius=0),
        )
        seeds = SeedSet.from_points([(2, 2), (7, 7)], 10, 10)
        buffer, _ = VoronoiRenderer(settings).render(seeds)

        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "scenario.ppm"
            write_ppm(buffer, output_path)
            data = output_path.read_bytes()

        header = b"P6\n10 10 255\n"
        assert data.startswith(header)
        assert len(data) == len(header) + 10 * 10 * 3

        # (0,0) is the first pixel: 0x20002 -> 02 00 02
        assert data[len(header) : len(header) + 3] == b"\x02\x00\x02"
        # (9,9) is the last pixel: 0x70007 -> 07 00 07
        assert data[-3:] == b"\x07\x00\x07"

    def test_default_render(self):
        """Full-size render with the reference defaults."""
        settings = get_default_settings().model_copy(
            update={"seeds": SeedConfig(count=50, random_seed=2024)}
        )
        renderer = VoronoiRenderer(settings)
        seeds = renderer.generate_seeds()
        buffer, stats = renderer.render(seeds)

        assert len(seeds) == 50
        assert stats.pixel_count == 1_000_000
        assert stats.marker_pixels > 0

        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "output.ppm"
            write_ppm(buffer, output_path)

            assert output_path.stat().st_size == len(b"P6\n1000 1000 255\n") + 3_000_000

            loaded = read_ppm(output_path)
            assert np.array_equal(loaded.pixels, buffer.pixels & 0x00FFFFFF)

        # Markers are painted over their seeds
        for seed in seeds:
            assert buffer.get(seed.x, seed.y) == COLOR_BLACK

    def test_sampled_pixels_match_scalar_search(self):
        settings = VoronoizerSettings(
            canvas=CanvasConfig(width=120, height=80),
            seeds=SeedConfig(count=15, random_seed=3),
            marker=MarkerConfig(radius=0),
        )
        renderer = VoronoiRenderer(settings)
        seeds = renderer.generate_seeds()
        buffer, _ = renderer.render(seeds)

        for x, y in [(0, 0), (119, 79), (60, 40), (13, 71), (101, 5)]:
            idx = nearest_seed_index(Point(x, y), seeds)
            assert buffer.get(x, y) == seed_to_color(seeds[idx])

    def test_repeat_render_is_byte_identical(self):
        settings = VoronoizerSettings(
            canvas=CanvasConfig(width=90, height=60),
            seeds=SeedConfig(count=12, random_seed=8),
        )
        first = VoronoiRenderer(settings)
        second = VoronoiRenderer(settings)

        a, _ = first.render(first.generate_seeds())
        b, _ = second.render(second.generate_seeds(), max_workers=2)
        assert encode_ppm(a) == encode_ppm(b)

    def test_corner_seeds_clip_markers(self):
        settings = VoronoizerSettings(
            canvas=CanvasConfig(width=30, height=20),
            marker=MarkerConfig(radius=6),
        )
        seeds = SeedSet.from_points([(0, 0), (29, 19)], 30, 20)
        buffer, stats = VoronoiRenderer(settings).render(seeds)

        assert buffer.get(0, 0) == COLOR_BLACK
        assert buffer.get(29, 19) == COLOR_BLACK
        assert buffer.get(15, 10) != COLOR_BLACK
        assert stats.marker_pixels > 0
