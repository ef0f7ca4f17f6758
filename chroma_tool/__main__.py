"""chroma-tool — Colour contrast, palette and format conversion helpers.

Usage: uv run chroma-tool <command> [args] [--json]

Commands are auto-discovered from chroma_tool/commands/.
Each command module's docstring is its documentation.
Run `chroma-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, chroma-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from chroma_tool import registry
from chroma_tool.core.env import load_env
from chroma_tool.core.report import format_json, format_text
from chroma_tool.core.types import Report


def _short_doc(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  chroma-tool contrast '#1e293b'\n"
        "  chroma-tool analogous '#ff0000' '#00ff00' -n 3 --json\n"
        "  chroma-tool alpha '#123456' 0.5\n"
        "  chroma-tool hex-to-rgb '#abc'\n"
        '  chroma-tool rgb-to-hex 37 99 235\n'
        "  chroma-tool swatch ./tmp/palette.png '#2563eb' -n 4\n"
        '  chroma-tool help swatch\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  CHROMA_TOOL_THRESHOLD    contrast luminance cutoff (186)\n'
        '  CHROMA_TOOL_RESULTS      analogous colours per seed (3)\n'
        '  CHROMA_TOOL_SWATCH_SIZE  swatch block size in pixels (64)\n'
    )
    parser = argparse.ArgumentParser(
        prog='chroma-tool',
        description='Colour contrast, palette and format conversion helpers.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name))
        cmd.configure(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    # `help` subcommand prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<12} {_short_doc(name)}')
        print('\nRun: chroma-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else, OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'chroma-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    report = Report(command=args.command)
    try:
        registry.get(args.command).execute(args, report)
    except ValueError as e:  # ColorError, bad settings, non-hex digits
        print(f'chroma-tool: error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
