"""Packed 32-bit colors.

Colors are plain integers laid out as 0xAABBGGRR: red lives in the lowest
byte, alpha in the highest. Image writers emit the three low bytes in
ascending order and drop alpha.
"""

from voronoizer.domain.point import Point

Color = int

COLOR_WHITE: Color = 0xFFFFFFFF
COLOR_RED: Color = 0xFF0000FF
COLOR_GREEN: Color = 0xFF00FF00
COLOR_BLUE: Color = 0xFFFF0000
COLOR_BLACK: Color = 0xFF000000
COLOR_BACKGROUND: Color = 0xFF201717

PALETTE: dict[str, Color] = {
    "white": COLOR_WHITE,
    "red": COLOR_RED,
    "green": COLOR_GREEN,
    "blue": COLOR_BLUE,
    "black": COLOR_BLACK,
    "background": COLOR_BACKGROUND,
}

# Seed coordinates are packed into 16-bit halves of a color
COORD_LIMIT = 1 << 16


def pack_color(red: int, green: int, blue: int, alpha: int = 0xFF) -> Color:
    """Pack 8-bit channels into a 0xAABBGGRR color."""
    for channel in (red, green, blue, alpha):
        assert 0 <= channel <= 0xFF, f"channel out of range: {channel}"
    return (alpha << 24) | (blue << 16) | (green << 8) | red


def seed_to_color(point: Point) -> Color:
    """Derive a region color from the coordinates of its seed.

    The x coordinate goes into the high 16 bits and y is XORed into the
    result. The mapping is not colorimetric; it only needs to give
    neighbouring regions distinct values.

    Args:
        point: Seed location, both coordinates in [0, 65536)

    Returns:
        Packed color for every pixel of the seed's region
    """
    assert 0 <= point.x < COORD_LIMIT, f"x out of 16-bit range: {point.x}"
    assert 0 <= point.y < COORD_LIMIT, f"y out of 16-bit range: {point.y}"
    return (point.x << 16) ^ point.y


def parse_color(value: str) -> Color:
    """Parse a color from CLI text.

    Accepts palette names ("black", "red", ...), hex colors written as
    "#RRGGBB" (opaque), "0xAABBGGRR" packed literals and plain decimal
    integers.

    Raises:
        ValueError: If the value cannot be parsed or does not fit 32 bits
    """
    text = value.strip().lower()

    if text in PALETTE:
        return PALETTE[text]

    if text.startswith("#"):
        hex_digits = text[1:]
        if len(hex_digits) != 6:
            raise ValueError(f"expected #RRGGBB, got '{value}'")
        red, green, blue = (int(hex_digits[i : i + 2], 16) for i in (0, 2, 4))
        return pack_color(red, green, blue)

    color = int(text, 16) if text.startswith("0x") else int(text)
    if not 0 <= color <= 0xFFFFFFFF:
        raise ValueError(f"color does not fit in 32 bits: '{value}'")
    return color
