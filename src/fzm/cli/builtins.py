"""Built-in ``help`` and ``version`` commands.

Both handlers render a fixed template into the context's stdout
stream and return :data:`~fzm.cli.exit_codes.SUCCESS`.  The templates
are compiled at import time, so a syntax mistake in them fails loudly
on the first import instead of at the user's terminal.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fzm.cli import exit_codes
from fzm.core.models import Command
from fzm.core.protocols import CommandContext
from fzm.core.template import Template

VERSION_TEMPLATE = Template(
    "{{style.reset}}{{style.green}}{{app.name}}{{style.reset}}, "
    "{{app.version}} {{app.os}}/{{app.arch}}\n"
    "{{app.copyright}}\n"
)

HELP_TEMPLATE = Template(
    """\
{{style.reset}}{{style.green}}{{app.name}}{{style.reset}}, {{app.version}} {{app.os}}/{{app.arch}}
{{app.description}}

{{style.yellow}}USAGE:{{style.reset}}
   {{style.green}}{{app.name}}{{style.reset}} [command] [options] [args]

{{style.yellow}}COMMANDS:{{style.reset}}
{{#commands}}
   {{style.green}}{{name}}{{style.reset}}{{padding}}{{description}}
{{/commands}}

{{style.yellow}}COPYRIGHT:{{style.reset}}
   {{app.copyright}}
"""
)


def template_data(context: CommandContext) -> dict[str, Any]:
    """Collect everything the built-in templates may reference."""
    identity = context.identity
    return {
        "style": context.out.style,
        "app": {
            "name": identity.name,
            "version": identity.version,
            "os": identity.os,
            "arch": identity.arch,
            "author": identity.author,
            "copyright": identity.copyright,
            "description": identity.description,
        },
        "commands": context.registry.command_help(),
    }


def print_help(context: CommandContext, args: Sequence[str]) -> int:
    """Render the usage screen with the sorted command table."""
    context.out.render(HELP_TEMPLATE, template_data(context))
    return exit_codes.SUCCESS


def print_version(context: CommandContext, args: Sequence[str]) -> int:
    """Render the one-line identity banner."""
    context.out.render(VERSION_TEMPLATE, template_data(context))
    return exit_codes.SUCCESS


HELP_COMMAND = Command(name="help", handler=print_help, description="Print this help message and exit")

VERSION_COMMAND = Command(name="version", handler=print_version, description="Print the app version")

BUILTIN_COMMANDS: tuple[Command, ...] = (HELP_COMMAND, VERSION_COMMAND)
