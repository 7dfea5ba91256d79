"""Core layer — command registry, dispatch and template rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from fzm.core.dispatcher import DEFAULT_COMMAND, Dispatcher
from fzm.core.models import AppIdentity, Command, CommandHelp
from fzm.core.protocols import CommandContext, CommandHandler, OutputSink
from fzm.core.registry import CommandRegistry
from fzm.core.template import Template, render

__all__: list[str] = [
    "DEFAULT_COMMAND",
    "AppIdentity",
    "Command",
    "CommandContext",
    "CommandHandler",
    "CommandHelp",
    "CommandRegistry",
    "Dispatcher",
    "OutputSink",
    "Template",
    "render",
]
