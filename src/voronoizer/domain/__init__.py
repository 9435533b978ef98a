"""Domain models for voronoizer.

This module contains the value types the renderer works with:

- Immutable where possible (using frozen dataclasses)
- Independent of numpy buffers and file formats

Key types:
- Point: An integer pixel coordinate
- Color: A packed 0xAABBGGRR integer, plus palette constants
- SeedSet: The ordered seeds of a diagram
"""

from voronoizer.domain.color import (
    COLOR_BACKGROUND,
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_WHITE,
    PALETTE,
    Color,
    pack_color,
    parse_color,
    seed_to_color,
)
from voronoizer.domain.point import Point
from voronoizer.domain.seeds import SeedSet, make_rng

__all__: list[str] = [
    # Palette
    "COLOR_BACKGROUND",
    "COLOR_BLACK",
    "COLOR_BLUE",
    "COLOR_GREEN",
    "COLOR_RED",
    "COLOR_WHITE",
    "PALETTE",
    # Core types
    "Color",
    "Point",
    "SeedSet",
    # Helpers
    "make_rng",
    "pack_color",
    "parse_color",
    "seed_to_color",
]
