"""Convert red, green and blue components to a '#rrggbb' string.

Example:
    uv run chroma-tool rgb-to-hex 37 99 235
"""

from chroma_tool.core.colors import rgb_to_hex
from chroma_tool.core.types import Command, Report

command = Command(
    name='rgb-to-hex',
    help="Convert R G B components to '#rrggbb'.",
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('red', type=int)
    parser.add_argument('green', type=int)
    parser.add_argument('blue', type=int)


@command.run
def run(args, report: Report) -> None:
    components = [args.red, args.green, args.blue]
    report.add(components, {'hex': rgb_to_hex(*components)})
