"""Colour conversion and contrast helpers.

All functions are pure and take colour strings in one of two text forms:

    hex   '#RGB' or '#RRGGBB' (the '#' is optional where noted)
    rgb   'rgb(r, g, b)' with decimal components

Nothing here keeps state between calls; every function re-parses its input.

Example:
    >>> get_contrasting_color('#fafafa')
    '#000'
    >>> hex_to_rgb('#abc')
    'rgb(170, 187, 204)'
"""

from collections.abc import Callable, Sequence

from chroma_tool.core.analogous import analogous as default_analogous
from chroma_tool.core.errors import InvalidOpacity
from chroma_tool.core.parse import HEX_DIGITS, parse_color, round_half_up

# Leading analogous colours dropped per seed; they sit too close to the seed itself.
ANALOGOUS_SKIP = 3

AnalogousFn = Callable[[str, int], Sequence[str]]


def luminance(r: int, g: int, b: int) -> float:
    """Perceived brightness with ITU-R BT.601 weights, 0-255 scale."""
    return r * 0.299 + g * 0.587 + b * 0.114


def get_contrasting_color(color: str, threshold: float = 186) -> str:
    """Return '#000' for light backgrounds and '#FFF' for dark ones."""
    r, g, b = parse_color(color)
    return '#000' if luminance(r, g, b) > threshold else '#FFF'


def get_analogous_colors(
    colors: Sequence[str],
    results: int,
    analogous: AnalogousFn = default_analogous,
) -> list[str]:
    """Build a flat palette of `results` analogous colours per seed.

    Per-seed lists are interleaved rather than concatenated:
    [[A, AA, AAA], [B, BB, BBB]] -> [A, B, AA, BB, AAA, BBB].

    `analogous(seed, count)` supplies the hue rotation. Its first
    ANALOGOUS_SKIP entries are discarded, so it is asked for
    `results + ANALOGOUS_SKIP` colours. Errors it raises propagate as-is.
    """
    per_seed = [list(analogous(color, results + ANALOGOUS_SKIP))[ANALOGOUS_SKIP:] for color in colors]

    palette: list[str] = []
    longest = max((len(seq) for seq in per_seed), default=0)
    for i in range(longest):
        for seq in per_seed:
            if i < len(seq):
                palette.append(seq[i])
    return palette


def add_alpha(color: str, opacity: float) -> str:
    """Append a two-digit uppercase alpha byte to `color`.

    This is plain concatenation: `color` is not parsed or checked.

    Raises:
        InvalidOpacity: opacity is outside [0, 1] or NaN.
    """
    if not 0 <= opacity <= 1:
        raise InvalidOpacity(opacity)
    return f'{color}{round_half_up(opacity * 255):02X}'


def hex_to_rgb(h: str) -> str:
    """'#RGB' or '#RRGGBB' -> 'rgb(R, G, B)'.

    Any other length yields 'rgb(0, 0, 0)' without complaint. Callers that need
    validation should use parse_color() instead.

    Raises:
        ValueError: a 3 or 6 digit body holds anything but hex digits
            (signs and spaces included, which int() would otherwise accept).
    """
    r = g = b = 0
    if len(h) in (4, 7) and not HEX_DIGITS.fullmatch(h[1:]):
        raise ValueError(f'Invalid hex digits: {h}')
    if len(h) == 4:
        r, g, b = (int(c * 2, 16) for c in h[1:4])
    elif len(h) == 7:
        r, g, b = int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16)
    return f'rgb({r}, {g}, {b})'


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """(R, G, B) -> '#rrggbb'. Components are not range-checked."""
    parts = []
    for value in (red, green, blue):
        digits = format(value, 'x')
        parts.append(f'0{digits}' if len(digits) == 1 else digits)
    return '#' + ''.join(parts)
