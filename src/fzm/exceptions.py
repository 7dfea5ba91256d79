"""Custom exception hierarchy for fzm.

All exceptions raised deliberately by fzm inherit from
:class:`FzmError` so that the CLI error boundary can render a clean
message instead of a stack trace.

Hierarchy
---------
FzmError
├── ConfigurationError
├── DuplicateCommandError
├── TemplateSyntaxError
├── StreamReleasedError
├── CommandUnavailableError
└── EnvironmentError
"""

from __future__ import annotations


class FzmError(Exception):
    """Base exception for all fzm errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(FzmError):
    """Raised when an ``FZM_*`` environment variable holds an invalid value."""


# --- Command registry ------------------------------------------------------

class DuplicateCommandError(FzmError):
    """Raised when a command name is registered twice."""


class CommandUnavailableError(FzmError):
    """Raised when a registered command has no implementation in this build."""


# --- Rendering -------------------------------------------------------------

class TemplateSyntaxError(FzmError):
    """Raised when a template cannot be compiled.

    Templates are literals owned by the program, so this always points
    at a programming mistake rather than bad user input.
    """


class StreamReleasedError(FzmError):
    """Raised when writing to a :class:`ColourStream` after ``release()``."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(FzmError):
    """Raised when a required runtime dependency is not available."""
