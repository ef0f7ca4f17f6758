"""Default hue-rotation backend for analogous palettes.

Mirrors tinycolor's `analogous(results, slices)` so palettes match what a
browser front end built on tinycolor2 would show for the same seed:

    - the seed itself comes first (normalised to lowercase '#rrggbb'),
    - the remaining `count - 1` colours step 360/slices degrees of hue,
      starting (part * count) >> 1 degrees below the seed,
    - saturation and lightness stay those of the seed.

With the default 30 slices and count=6 on pure red (hue 0) the hues are
0, 336, 348, 0, 12, 24. Note the seed hue comes round again in the middle.
"""

import colorsys

from chroma_tool.core.parse import parse_color, round_half_up


def _hls_to_hex(hue: float, light: float, sat: float) -> str:
    r, g, b = colorsys.hls_to_rgb(hue, light, sat)
    return '#' + ''.join(f'{round_half_up(c * 255):02x}' for c in (r, g, b))


def analogous(seed: str, count: int, slices: int = 30) -> list[str]:
    """Return `count` colours around `seed` on the hue wheel, seed first.

    A count below 1 still returns the seed alone (tinycolor would treat 0 as 6
    and loop forever on negatives). rgb() components are clamped to 0-255.

    Only hex and rgb() seeds are understood; named colours, #RRGGBBAA, rgba()
    and hsl() are rejected.

    Raises:
        InvalidColor: seed is not a hex or rgb() colour string.
    """
    r, g, b = (min(max(v, 0), 255) for v in parse_color(seed))
    hue, light, sat = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)

    part = 360 / slices
    ret = [f'#{r:02x}{g:02x}{b:02x}']
    degrees = (hue * 360 - (int(part * count) >> 1) + 720) % 360
    for _ in range(count - 1):
        degrees = (degrees + part) % 360
        ret.append(_hls_to_hex(degrees / 360, light, sat))
    return ret
