"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols, never on the concrete CLI
application or output stream, so handlers, registry and renderer can
be exercised with plain test doubles.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from fzm.core.models import AppIdentity
    from fzm.core.registry import CommandRegistry


class OutputSink(Protocol):
    """Anything handlers can write rendered output to."""

    @property
    def style(self) -> Mapping[str, str]:
        """ANSI style table, or empty strings when colour is disabled."""
        ...  # pragma: no cover

    def write(self, data: bytes | str) -> int:
        """Append *data* to the sink and return the number of bytes."""
        ...  # pragma: no cover

    def render(self, template: Any, bindings: Any) -> int:
        """Render a template into the sink and return the number of bytes."""
        ...  # pragma: no cover

    def flush(self) -> None:
        """Push buffered output to the underlying destination."""
        ...  # pragma: no cover


class CommandContext(Protocol):
    """What a handler may see of the running application."""

    identity: AppIdentity
    registry: CommandRegistry
    out: OutputSink
    err: OutputSink


class CommandHandler(Protocol):
    """Contract for sub-command implementations.

    A handler receives the application context and the argument tokens
    that follow the command name.  It returns the process exit code.
    Flag parsing of *args* is entirely the handler's business.
    """

    def __call__(self, context: CommandContext, args: Sequence[str]) -> int:
        ...  # pragma: no cover
