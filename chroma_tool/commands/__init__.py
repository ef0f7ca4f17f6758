"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by chroma_tool.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary.
"""

# PyInstaller hidden imports, keep in sync with command modules
import chroma_tool.commands.alpha as _alpha  # noqa: F401
import chroma_tool.commands.analogous as _analogous  # noqa: F401
import chroma_tool.commands.contrast as _contrast  # noqa: F401
import chroma_tool.commands.hex_to_rgb as _hex_to_rgb  # noqa: F401
import chroma_tool.commands.rgb_to_hex as _rgb_to_hex  # noqa: F401
import chroma_tool.commands.swatch as _swatch  # noqa: F401
