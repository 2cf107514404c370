"""String pixel widths for column auto-sizing.

Widths are the per-character pixel sizes Excel uses for the default
Calibri 11 font. Characters missing from the table, including all non-ASCII
text, count as 8 pixels.
"""

from __future__ import annotations

from types import MappingProxyType

DEFAULT_CHAR_WIDTH = 8

# Max digit width and cell padding for Calibri 11, in pixels.
MAX_DIGIT_WIDTH = 7
CELL_PADDING = 5

_WIDTH_GROUPS: dict[int, str] = {
    3: " '",
    4: ",.:;I`ijl",
    5: "!()-J[]frt{}",
    6: '"/L\\csz',
    7: "#$*+0123456789<=>?EFSTYZ^_agkvxy|~",
    8: "BCKPRXbdehnopqu",
    9: "ADGHUV",
    10: "&NOQ",
    11: "%w",
    12: "Mm",
    13: "@W",
}

CHAR_WIDTHS = MappingProxyType(
    {ch: width for width, chars in _WIDTH_GROUPS.items() for ch in chars}
)


def pixel_width(string: str) -> int:
    """Return the approximate rendered width of ``string`` in pixels.

    The result is an unbounded Python int; the file format only has room for
    16 bits, so strings wider than 65535 pixels are not meaningful input.
    """
    return sum(CHAR_WIDTHS.get(ch, DEFAULT_CHAR_WIDTH) for ch in string)


def column_width_from_pixels(pixels: int) -> float:
    """Convert a pixel width to the character-unit width used for columns."""
    if pixels <= MAX_DIGIT_WIDTH + CELL_PADDING:
        return pixels / (MAX_DIGIT_WIDTH + CELL_PADDING)
    return (pixels - CELL_PADDING) / MAX_DIGIT_WIDTH
