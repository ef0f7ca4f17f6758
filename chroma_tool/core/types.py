"""Shared types for chroma-tool: Command, Report."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='contrast', help='Pick #000 or #FFF for a background')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('color', nargs='+')

        @command.run
        def run(args, report):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._args_fn: Callable | None = None
        self._run_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        """Add this command's own arguments to its subparser."""
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report)


@dataclass
class Report:
    """Accumulates results from a command for text/JSON output."""

    command: str = ''
    entries: list[dict[str, Any]] = field(default_factory=list)
    outputs: list[str] = field(default_factory=list)  # files written

    def add(self, input_value: Any, data: dict[str, Any]) -> None:
        """Record the result for one input."""
        self.entries.append({'input': input_value, **data})

    def add_output(self, path: str) -> None:
        self.outputs.append(path)
