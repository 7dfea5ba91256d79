"""Ordered registry of sub-commands.

The registry is kept sorted ascending by command name, comparing the
UTF-8 bytes of each name, after every insertion.  Help output is
therefore deterministic regardless of registration order.

Indices handed out by :meth:`CommandRegistry.find_by_name` are only
valid until the next :meth:`CommandRegistry.register` call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from fzm.core.models import Command, CommandHelp
from fzm.exceptions import DuplicateCommandError

logger = logging.getLogger(__name__)

HELP_COLUMN_GAP: int = 3
"""Spaces between the longest command name and its description."""


class CommandRegistry:
    """Sorted, name-unique collection of :class:`Command` entries."""

    def __init__(self) -> None:
        self._commands: list[Command] = []

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def register(self, command: Command) -> None:
        """Insert *command* and restore name order.

        Raises
        ------
        DuplicateCommandError
            When a command with the same name is already registered.
            The registry is left unchanged.
        """
        if command.name in self:
            raise DuplicateCommandError(
                f"Command '{command.name}' is already registered.",
                hint="Each sub-command name must be unique.",
            )
        self._commands.append(command)
        self._commands.sort(key=lambda entry: entry.sort_key)
        logger.debug("Registered command %r (%d total)", command.name, len(self._commands))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, index: int) -> Command:
        """Return the command at *index*.

        An index outside ``0 <= index < len(self)`` is a caller bug;
        negative indices are not wrapped around.
        """
        if not 0 <= index < len(self._commands):
            raise IndexError(
                f"command index {index} out of range for {len(self._commands)} commands"
            )
        return self._commands[index]

    def find_by_name(self, name: str) -> int | None:
        """Return the position of the command named exactly *name*."""
        for index, command in enumerate(self._commands):
            if command.name == name:
                return index
        return None

    def names(self) -> list[str]:
        """Return command names in registry order."""
        return [command.name for command in self._commands]

    # ------------------------------------------------------------------
    # Help projection
    # ------------------------------------------------------------------

    def command_help(self) -> list[CommandHelp]:
        """Project the registry into aligned :class:`CommandHelp` rows."""
        if not self._commands:
            return []
        column = max(len(command.name) for command in self._commands) + HELP_COLUMN_GAP
        return [
            CommandHelp(
                name=command.name,
                description=command.description,
                padding=" " * (column - len(command.name)),
            )
            for command in self._commands
        ]

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(tuple(self._commands))

    def __contains__(self, name: object) -> bool:
        return any(command.name == name for command in self._commands)
