"""Generate an analogous palette from one or more seed colours.

For every seed, asks the hue rotation for RESULTS + 3 neighbours and drops
the first three (the seed and the colours nearest it). Palettes from several
seeds are interleaved: first pick of every seed, then second pick, and so on.

Example:
    uv run chroma-tool analogous '#ff0000' '#00ff00' -n 3
"""

from chroma_tool.core.colors import get_analogous_colors
from chroma_tool.core.env import setting
from chroma_tool.core.types import Command, Report

command = Command(
    name='analogous',
    help='Interleaved analogous palette from seed colours.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('color', nargs='+', help='Seed colour(s), hex or rgb()')
    parser.add_argument(
        '-n',
        '--results',
        type=int,
        default=None,
        help='Colours per seed (default: CHROMA_TOOL_RESULTS or 3)',
    )


@command.run
def run(args, report: Report) -> None:
    results = args.results if args.results is not None else setting('RESULTS', 3, int)
    report.add(args.color, {'palette': get_analogous_colors(args.color, results)})
