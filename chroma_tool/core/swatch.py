"""Render a palette as a strip of labelled colour blocks."""

from collections.abc import Sequence
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw

from chroma_tool.core.colors import get_contrasting_color
from chroma_tool.core.parse import parse_color


def render_swatch(colors: Sequence[str], size: int = 64) -> Image.Image:
    """One size x size block per colour, left to right, labelled with its hex.

    Labels are drawn in whichever of #000/#FFF contrasts with the block.

    Raises:
        ValueError: no colours given.
        InvalidColor: a colour is not hex or rgb().
    """
    if not colors:
        raise ValueError('render_swatch needs at least one colour')

    # rgb() input is not range-checked; clamp so it fits uint8
    rgb = [tuple(min(v, 255) for v in parse_color(c)) for c in colors]
    arr = np.zeros((size, size * len(rgb), 3), dtype=np.uint8)
    for i, (r, g, b) in enumerate(rgb):
        arr[:, i * size : (i + 1) * size] = (r, g, b)

    image = Image.fromarray(arr)
    draw = ImageDraw.Draw(image)
    for i, (r, g, b) in enumerate(rgb):
        label = f'#{r:02x}{g:02x}{b:02x}'
        draw.text((i * size + 4, size - 14), label, fill=get_contrasting_color(label))
    return image


def save_swatch(colors: Sequence[str], path: str | Path, size: int = 64) -> Path:
    """Render and write a PNG swatch. Returns the path written."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    render_swatch(colors, size=size).save(out, format='PNG')
    return out
