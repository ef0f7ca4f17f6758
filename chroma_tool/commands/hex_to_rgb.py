"""Convert '#RGB' / '#RRGGBB' colours to 'rgb(r, g, b)'.

Inputs of any other length come out as rgb(0, 0, 0).

Example:
    uv run chroma-tool hex-to-rgb '#abc' '#2563eb'
"""

from chroma_tool.core.colors import hex_to_rgb
from chroma_tool.core.types import Command, Report

command = Command(
    name='hex-to-rgb',
    help="Convert hex colours to 'rgb(r, g, b)'.",
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('hex', nargs='+', help="Hex colour(s) including '#'")


@command.run
def run(args, report: Report) -> None:
    for h in args.hex:
        report.add(h, {'rgb': hex_to_rgb(h)})
