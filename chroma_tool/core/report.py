"""Report builder: text and JSON output for chroma-tool results."""

import json
from typing import Any

from chroma_tool.core.types import Report


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ', '.join(str(v) for v in value)
    return str(value)


def format_text(report: Report) -> str:
    """Format report as human-readable text, one line per input."""
    lines = []
    for entry in report.entries:
        source = _format_value(entry['input'])
        rest = {k: v for k, v in entry.items() if k != 'input'}
        if len(rest) == 1:
            # Single-valued results read as "input -> value"
            (value,) = rest.values()
            lines.append(f'{source} → {_format_value(value)}')
        else:
            lines.append(source)
            for k, v in rest.items():
                lines.append(f'  {k}: {_format_value(v)}')

    for path in report.outputs:
        lines.append(f'wrote {path}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'results': report.entries,
    }
    if report.outputs:
        obj['outputs'] = report.outputs
    return json.dumps(obj, indent=2)
