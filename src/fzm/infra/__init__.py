"""Infrastructure layer — terminal streams and platform probing.

Rules
-----
* No imports from ``cli``.
* No direct ``print()``; output goes through :class:`ColourStream`.
"""

from fzm.infra.colour_stream import ANSI_CODES, ColourStream, UseColour
from fzm.infra.platform_info import current_arch, current_os

__all__: list[str] = [
    "ANSI_CODES",
    "ColourStream",
    "UseColour",
    "current_arch",
    "current_os",
]
