"""chroma-tool — colour contrast, palette and format conversion helpers."""

from chroma_tool.core.analogous import analogous
from chroma_tool.core.colors import (
    add_alpha,
    get_analogous_colors,
    get_contrasting_color,
    hex_to_rgb,
    rgb_to_hex,
)
from chroma_tool.core.errors import ColorError, InvalidColor, InvalidOpacity
from chroma_tool.core.parse import parse_color

__all__ = [
    'ColorError',
    'InvalidColor',
    'InvalidOpacity',
    'add_alpha',
    'analogous',
    'get_analogous_colors',
    'get_contrasting_color',
    'hex_to_rgb',
    'parse_color',
    'rgb_to_hex',
]
