"""Write a PNG swatch strip for a set of colours.

Each colour becomes a square block labelled with its hex value in a
contrasting text colour. With --results N the seeds are first expanded into
their interleaved analogous palette (see `chroma-tool help analogous`) and
that palette is drawn instead.

Block size defaults to CHROMA_TOOL_SWATCH_SIZE or 64 pixels.

Example:
    uv run chroma-tool swatch ./tmp/palette.png '#2563eb' '#f97316' -n 4
"""

from chroma_tool.core.colors import get_analogous_colors
from chroma_tool.core.env import setting
from chroma_tool.core.swatch import save_swatch
from chroma_tool.core.types import Command, Report

command = Command(
    name='swatch',
    help='Render colours (or their analogous palette) to a PNG strip.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('output', help='PNG path to write')
    parser.add_argument('color', nargs='+', help='Colour(s), hex or rgb()')
    parser.add_argument(
        '-n',
        '--results',
        type=int,
        default=None,
        help='Expand each colour into N analogous colours before drawing',
    )
    parser.add_argument('-s', '--size', type=int, default=None, help='Block edge in pixels')


@command.run
def run(args, report: Report) -> None:
    colors = list(args.color)
    if args.results is not None:
        colors = get_analogous_colors(colors, args.results)
    size = args.size if args.size is not None else setting('SWATCH_SIZE', 64, int)

    path = save_swatch(colors, args.output, size=size)
    report.add(args.color, {'swatch': colors})
    report.add_output(str(path))
