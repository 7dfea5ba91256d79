"""CLI application entry point and command routing for fzm.

:class:`Application` is the composition root: it owns the command
registry, the stdout/stderr :class:`~fzm.infra.colour_stream.ColourStream`
pair and the identity metadata, and it is handed to every command
handler.  Leaving its ``with`` block releases stdout, then stderr,
exactly once on every exit path.

:func:`cli` is the **sole error boundary** for the process.  It catches
:class:`~fzm.exceptions.FzmError`, ``KeyboardInterrupt`` and any
unexpected ``Exception``, renders a short message via Rich and returns
a well-defined exit code.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import IO

from fzm.cli import exit_codes
from fzm.cli.builtins import BUILTIN_COMMANDS, HELP_COMMAND
from fzm.cli.console import console
from fzm.cli.logging_setup import configure_logging
from fzm.cli.settings import Settings
from fzm.cli.toolchain import TOOLCHAIN_COMMANDS
from fzm.core.dispatcher import Dispatcher
from fzm.core.models import AppIdentity, Command
from fzm.core.registry import CommandRegistry
from fzm.exceptions import FzmError
from fzm.infra.colour_stream import ColourStream, UseColour
from fzm.infra.platform_info import current_arch, current_os
from fzm.version import __version__

logger = logging.getLogger(__name__)

APP_NAME: str = "fzm"
APP_DESCRIPTION: str = "A fast and simple Zig version manager, built in Zig"
APP_AUTHOR: str = "Matthew Winter"
APP_COPYRIGHT: str = "Copyright © 2023 Matthew Winter"


def default_identity() -> AppIdentity:
    """Identity of the installed ``fzm`` on the running platform."""
    return AppIdentity(
        name=APP_NAME,
        version=__version__,
        description=APP_DESCRIPTION,
        author=APP_AUTHOR,
        copyright=APP_COPYRIGHT,
        arch=current_arch(),
        os=current_os(),
    )


# ---------------------------------------------------------------------------
# Composition root
# ---------------------------------------------------------------------------

class Application:
    """Registry, output streams and identity for one CLI run.

    The built-in ``help`` and ``version`` commands are registered
    before the constructor returns, followed by *commands*.

    Parameters
    ----------
    identity:
        Name, version and copyright rendered by ``help``/``version``.
    commands:
        Extra sub-commands to register.
    stdout, stderr:
        Binary destinations; default to the process streams.
    use_colour, no_color:
        Colour activation policy for both streams.
    """

    def __init__(
        self,
        identity: AppIdentity,
        *,
        commands: Iterable[Command] = (),
        stdout: IO[bytes] | None = None,
        stderr: IO[bytes] | None = None,
        use_colour: UseColour = UseColour.AUTO,
        no_color: bool = False,
    ) -> None:
        self.identity: AppIdentity = identity
        self.registry: CommandRegistry = CommandRegistry()
        for command in (*BUILTIN_COMMANDS, *commands):
            self.registry.register(command)

        self.out: ColourStream = ColourStream(
            sys.stdout.buffer if stdout is None else stdout, use_colour, no_color
        )
        self.err: ColourStream = ColourStream(
            sys.stderr.buffer if stderr is None else stderr, use_colour, no_color
        )
        self._dispatcher: Dispatcher = Dispatcher(self.registry)
        self._released: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> Application:
        return self

    def __exit__(self, *_args: object) -> None:
        self.release()

    def release(self) -> None:
        """Release stdout, then stderr.  Later calls do nothing."""
        if self._released:
            return
        self._released = True
        self.out.release()
        self.err.release()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_command(self, command: Command) -> None:
        """Register a caller-supplied sub-command."""
        self.registry.register(command)

    def run(self, argv: Sequence[str]) -> int:
        """Dispatch *argv* (program path first) and return the exit code.

        An unknown or missing command runs ``help``.  A closed output
        pipe ends the run quietly with :data:`exit_codes.SUCCESS`; any
        other handler exception propagates.
        """
        index = self._dispatcher.resolve(argv)
        command = HELP_COMMAND if index is None else self.registry.lookup(index)

        try:
            return command.handler(self, self._dispatcher.arguments(argv))
        except BrokenPipeError:
            # `fzm list-remote | head -n1` closes stdout early; not an error.
            logger.debug("Output pipe closed while running %r", command.name)
            self.out.broken_pipe = True
            return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point fd 1 at devnull so the interpreter's final flush cannot fail."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        logger.debug("Could not redirect stdout to %s", os.devnull)


def main(
    argv: list[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    stdout: IO[bytes] | None = None,
    stderr: IO[bytes] | None = None,
) -> int:
    """Run the fzm CLI.

    Parameters
    ----------
    argv:
        Explicit argument list without the program name.  When ``None``
        (default), ``sys.argv[1:]`` is used.  Accepting *argv* enables
        deterministic testing without monkeypatching.
    environ:
        Environment mapping; ``os.environ`` when ``None``.
    stdout, stderr:
        Binary destinations; the process streams when ``None``.

    Returns
    -------
    int
        OS process exit code.
    """
    settings = Settings.from_env(environ)
    configure_logging(settings.log_level)

    args = sys.argv[1:] if argv is None else argv
    identity = default_identity()

    with Application(
        identity,
        commands=TOOLCHAIN_COMMANDS,
        stdout=stdout,
        stderr=stderr,
        use_colour=settings.color,
        no_color=settings.no_color,
    ) as app:
        code = app.run([identity.name, *args])

    if app.out.broken_pipe and stdout is None:
        _silence_stdout()
    return code


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FzmError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
