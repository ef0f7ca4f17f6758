"""Shared parsing for hex and rgb() colour strings."""

import math
import re

from chroma_tool.core.errors import InvalidColor

RGB_PATTERN = re.compile(r'rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)', re.ASCII)
_HEX6 = re.compile(r'[0-9a-fA-F]{6}')
HEX_DIGITS = re.compile(r'[0-9a-fA-F]+')


def round_half_up(value: float) -> int:
    """Round .5 upwards (JS Math.round), unlike Python's banker's round()."""
    return math.floor(value + 0.5)


def parse_color(color: str) -> tuple[int, int, int]:
    """Parse a hex or rgb() colour string into (R, G, B).

    Strings longer than 7 characters are treated as rgb(), anything shorter as
    hex with an optional leading '#'. An 8-digit '#RRGGBBAA' therefore lands on
    the rgb() branch and is rejected.

    Raises:
        InvalidColor: the string fits neither form.
    """
    if len(color) > 7:
        m = RGB_PATTERN.fullmatch(color)
        if not m:
            raise InvalidColor(color)
        return int(m.group(1)), int(m.group(2)), int(m.group(3))

    h = color[1:] if color.startswith('#') else color
    # #FFF
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if not _HEX6.fullmatch(h):
        raise InvalidColor(color)
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
