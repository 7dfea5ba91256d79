"""Rich console for the CLI error boundary.

Error reports are printed after the application streams have been
released, so they go through their own stderr console.  Rich is
imported lazily; when it is missing the proxy falls back to plain
``print`` with the markup stripped.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from fzm.exceptions import EnvironmentError

_MARKUP = re.compile(r"\[/?[a-z ]+\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*(_MARKUP.sub("", str(obj)) for obj in objects), file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
