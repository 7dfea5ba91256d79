"""Domain models for fzm.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O and must remain pure
across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass

from fzm.core.protocols import CommandHandler


# ---------------------------------------------------------------------------
# Sub-command descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """A named sub-command and the handler that implements it."""

    name: str
    """Token typed on the command line (e.g. ``list-remote``)."""

    handler: CommandHandler
    """Callable invoked as ``handler(context, args)``; returns an exit code."""

    description: str
    """One-line summary shown in the help command table."""

    @property
    def sort_key(self) -> bytes:
        """Byte-wise ordering key used by the registry."""
        return self.name.encode("utf-8")


# ---------------------------------------------------------------------------
# Help projection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandHelp:
    """Rendering-only view of a :class:`Command`.

    ``padding`` is the run of spaces placed between the name and the
    description so every description starts in the same column.
    """

    name: str
    description: str
    padding: str


# ---------------------------------------------------------------------------
# Application identity
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AppIdentity:
    """Identity metadata rendered verbatim by ``help`` and ``version``."""

    name: str
    version: str
    description: str
    author: str
    copyright: str
    arch: str
    os: str
