"""Pick a readable foreground (#000 or #FFF) for each background colour.

Accepts hex ('#fff', '#ffffff', 'ffffff') and rgb() ('rgb(12, 34, 56)')
backgrounds. Luminance uses BT.601 weights; anything brighter than the
threshold gets black text, everything else white.

The default threshold of 186 can be changed per call with --threshold or
for every call with CHROMA_TOOL_THRESHOLD.

Example:
    uv run chroma-tool contrast '#1e293b' 'rgb(248, 250, 252)'
"""

from chroma_tool.core.colors import get_contrasting_color
from chroma_tool.core.env import setting
from chroma_tool.core.types import Command, Report

command = Command(
    name='contrast',
    help='Pick #000 or #FFF text for each background colour.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('color', nargs='+', help='Background colour(s), hex or rgb()')
    parser.add_argument(
        '-t',
        '--threshold',
        type=float,
        default=None,
        help='Luminance cutoff, 0-255 (default: CHROMA_TOOL_THRESHOLD or 186)',
    )


@command.run
def run(args, report: Report) -> None:
    threshold = args.threshold if args.threshold is not None else setting('THRESHOLD', 186.0, float)
    for color in args.color:
        report.add(color, {'contrast': get_contrasting_color(color, threshold)})
