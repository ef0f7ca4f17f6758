"""Append an alpha byte to a colour.

OPACITY runs from 0 (transparent) to 1 (opaque) and becomes two uppercase
hex digits tacked onto the colour as given: '#123456' at 0.5 -> '#12345680'.
The colour itself is not checked.

Example:
    uv run chroma-tool alpha '#123456' 0.5
"""

from chroma_tool.core.colors import add_alpha
from chroma_tool.core.types import Command, Report

command = Command(
    name='alpha',
    help='Append a two-digit alpha suffix to a colour.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('color', help='Colour, usually #RRGGBB')
    parser.add_argument('opacity', type=float, help='Opacity between 0 and 1')


@command.run
def run(args, report: Report) -> None:
    report.add(args.color, {'color': add_alpha(args.color, args.opacity)})
