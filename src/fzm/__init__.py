"""fzm — a fast and simple Zig version manager.

This package holds the command-dispatch and console-rendering core:
the sub-command registry, the colour-aware output stream and the
logic-less template renderer used for help and version output.
"""

from fzm.version import __version__

__all__: list[str] = ["__version__"]
