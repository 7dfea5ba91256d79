"""Resolve the requested sub-command from a process argument vector.

Only the first positional token is consumed.  Everything after it is
passed untouched to the selected handler.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fzm.core.registry import CommandRegistry

logger = logging.getLogger(__name__)

DEFAULT_COMMAND: str = "help"
"""Command used when the argument vector names none."""


class Dispatcher:
    """Map argument vectors onto registry indices.

    Parameters
    ----------
    registry:
        The registry to search.  The dispatcher holds a reference, so
        commands registered later are still found.
    """

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry: CommandRegistry = registry

    @staticmethod
    def requested_name(argv: Sequence[str]) -> str:
        """Return the command token in *argv*, defaulting to ``help``.

        ``argv[0]`` is the program path and is always skipped.
        """
        if len(argv) < 2:
            return DEFAULT_COMMAND
        return argv[1]

    @staticmethod
    def arguments(argv: Sequence[str]) -> list[str]:
        """Return the tokens following the command name."""
        return list(argv[2:])

    def resolve(self, argv: Sequence[str]) -> int | None:
        """Return the registry index of the requested command.

        ``None`` means no command matched; the caller falls back to
        ``help``.  This is the defined default, not an error.
        """
        name = self.requested_name(argv)
        index = self._registry.find_by_name(name)
        if index is None:
            logger.debug("No command named %r; falling back to %r", name, DEFAULT_COMMAND)
        else:
            logger.debug("Resolved command %r to index %d", name, index)
        return index
