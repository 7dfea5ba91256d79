"""Toolchain management commands.

``install``, ``uninstall``, ``list``, ``list-remote``, ``use`` and
``current`` are provided by separate collaborators that fetch, unpack
and switch Zig releases.  This build registers them so they appear in
help and dispatch normally; invoking one reports that it is not
available here.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from fzm.core.models import Command
from fzm.core.protocols import CommandContext
from fzm.exceptions import CommandUnavailableError


def _unavailable(name: str) -> Callable[[CommandContext, Sequence[str]], int]:
    def handler(context: CommandContext, args: Sequence[str]) -> int:
        raise CommandUnavailableError(
            f"'{name}' is not available in this build of {context.identity.name}.",
            hint=f"Run '{context.identity.name} help' to list commands.",
        )

    handler.__name__ = f"run_{name.replace('-', '_')}"
    return handler


TOOLCHAIN_COMMANDS: tuple[Command, ...] = (
    Command(name="current", handler=_unavailable("current"), description="Print the current Zig version"),
    Command(name="install", handler=_unavailable("install"), description="Install a new Zig version"),
    Command(name="list", handler=_unavailable("list"), description="List all locally installed Zig versions"),
    Command(
        name="list-remote",
        handler=_unavailable("list-remote"),
        description="List all available remote Zig versions",
    ),
    Command(name="uninstall", handler=_unavailable("uninstall"), description="Uninstall a Zig version"),
    Command(name="use", handler=_unavailable("use"), description="Change Zig version"),
)
