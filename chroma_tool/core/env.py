"""Settings and .env loading for chroma-tool.

Lookup order for every setting (first wins):
  1. Existing OS environment variables, never overwritten.
  2. The .env file passed with --env-file.
  3. The nearest .env walking up from cwd, stopping at a .git boundary.

Recognised settings:
  CHROMA_TOOL_THRESHOLD    default luminance threshold for `contrast` (186)
  CHROMA_TOOL_RESULTS      analogous colours per seed for `analogous` (3)
  CHROMA_TOOL_SWATCH_SIZE  swatch block edge in pixels (64)
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

T = TypeVar('T')

PREFIX = 'CHROMA_TOOL_'


def find_dotenv(start: Path) -> Path | None:
    """Return the first .env at or above `start`, or None past a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines, dropping comments, blanks and surrounding quotes."""
    values: dict[str, str] = {}
    with open(path, encoding='utf-8') as f:
        for raw in f:
            line = raw.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            key, _, value = line.partition('=')
            key = key.strip()
            if key:
                values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the file that was read, or None if there was nothing to read.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in read_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def setting(name: str, default: T, cast: Callable[[str], T] = str) -> T:
    """Read CHROMA_TOOL_<name> from the environment, cast, or fall back to default."""
    var = PREFIX + name
    raw = os.environ.get(var)
    if raw is None or raw == '':
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f'{var}={raw!r} is not a valid {getattr(cast, "__name__", "value")}') from e
