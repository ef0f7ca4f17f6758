"""chroma_tool.core — Foundation layer.

Contains the colour helpers, the default hue rotation, errors, types, settings
and the report/swatch renderers.
This module has NO dependencies on chroma_tool.commands or chroma_tool.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
