"""Command auto-discovery and registration.

Scans chroma_tool/commands/ for modules that define a `command` object
of type Command. Collects them into a dict keyed by command name.

Handles both normal Python (pkgutil.iter_modules) and frozen PyInstaller
binaries (where iter_modules returns nothing; falls back to the explicit
imports in commands/__init__.py).
"""

import importlib
import pkgutil
from types import ModuleType

from chroma_tool.core.types import Command

_registry: dict[str, Command] = {}
_modules: dict[str, ModuleType] = {}

# Known command module names, fallback for frozen binaries
_COMMAND_MODULES = [
    'alpha',
    'analogous',
    'contrast',
    'hex_to_rgb',
    'rgb_to_hex',
    'swatch',
]


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import chroma_tool.commands as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _COMMAND_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'chroma_tool.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd
            _modules[cmd.name] = module

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def module_for(name: str) -> ModuleType:
    """Return the module defining a command, for its docstring."""
    get(name)
    return _modules[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()
