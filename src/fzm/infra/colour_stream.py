"""Buffered terminal writer with optional ANSI colour.

A :class:`ColourStream` wraps a binary destination (``sys.stdout.buffer``
or ``sys.stderr.buffer``) and collects output in memory until
:meth:`ColourStream.flush`.  Whether colour is emitted is decided once,
at construction, from a :class:`UseColour` policy:

* ``always`` — colour on.
* ``never``  — colour off.
* ``auto``   — colour on only when the destination is a terminal and
  the caller did not pass ``no_color=True`` (derived from the
  `NO_COLOR <https://no-color.org/>`_ environment variable).

Colour is applied through :attr:`ColourStream.style`, a table of escape
codes handed to templates.  With colour off every entry is the empty
string, so the same template renders plain text.

Output failures are cosmetic: flush errors (a closed pipe included)
are swallowed and never change the exit code.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import IO, Any

from fzm.core.template import Template
from fzm.exceptions import StreamReleasedError

logger = logging.getLogger(__name__)


class UseColour(str, enum.Enum):
    """Colour activation policy."""

    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"


ANSI_CODES: Mapping[str, str] = MappingProxyType(
    {
        "reset": "\x1b[0m",
        "bold": "\x1b[1m",
        "dim": "\x1b[2m",
        "italic": "\x1b[3m",
        "underline": "\x1b[4m",
        "strike": "\x1b[9m",
        "black": "\x1b[30m",
        "red": "\x1b[31m",
        "green": "\x1b[32m",
        "yellow": "\x1b[33m",
        "blue": "\x1b[34m",
        "magenta": "\x1b[35m",
        "cyan": "\x1b[36m",
        "white": "\x1b[37m",
        "bright_black": "\x1b[90m",
        "bright_red": "\x1b[91m",
        "bright_green": "\x1b[92m",
        "bright_yellow": "\x1b[93m",
        "bright_blue": "\x1b[94m",
        "bright_magenta": "\x1b[95m",
        "bright_cyan": "\x1b[96m",
        "bright_white": "\x1b[97m",
    }
)
"""Named `ANSI escape codes <https://en.wikipedia.org/wiki/ANSI_escape_code#Colors>`_."""

PLAIN_CODES: Mapping[str, str] = MappingProxyType(dict.fromkeys(ANSI_CODES, ""))
"""Same keys as :data:`ANSI_CODES`, every value empty."""


def is_terminal(destination: Any) -> bool:
    """Return ``True`` when *destination* reports being an interactive TTY."""
    isatty = getattr(destination, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def colour_enabled(use_colour: UseColour, *, tty: bool, no_color: bool) -> bool:
    """Apply the activation policy."""
    if use_colour is UseColour.ALWAYS:
        return True
    if use_colour is UseColour.NEVER:
        return False
    return tty and not no_color


class ColourStream:
    """Buffered, colour-aware writer bound to one destination.

    Parameters
    ----------
    destination:
        Binary file-like object with ``write`` and ``flush``.
    use_colour:
        Activation policy, see :class:`UseColour`.
    no_color:
        ``True`` when ``NO_COLOR`` is set and non-empty.  Only consulted
        under :attr:`UseColour.AUTO`.

    Use :meth:`release` (or a ``with`` block) exactly once when done.
    """

    def __init__(
        self,
        destination: IO[bytes],
        use_colour: UseColour = UseColour.AUTO,
        no_color: bool = False,
    ) -> None:
        self._destination: IO[bytes] = destination
        self._buffer: bytearray = bytearray()
        self._released: bool = False
        self.broken_pipe: bool = False
        """Set once a flush found the reading end of the pipe closed."""
        self.enable_ansi_colours: bool = colour_enabled(
            UseColour(use_colour),
            tty=is_terminal(destination),
            no_color=no_color,
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> ColourStream:
        return self

    def __exit__(self, *_args: object) -> None:
        self.release()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def style(self) -> Mapping[str, str]:
        """Escape-code table for templates; empty strings with colour off."""
        return ANSI_CODES if self.enable_ansi_colours else PLAIN_CODES

    @property
    def released(self) -> bool:
        return self._released

    @property
    def pending(self) -> bytes:
        """Bytes written but not yet flushed."""
        return bytes(self._buffer)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write(self, data: bytes | str) -> int:
        """Append raw *data* to the buffer and return its length in bytes."""
        if self._released:
            raise StreamReleasedError("Cannot write to a released stream.")
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buffer += data
        return len(data)

    def format(self, spec: str, *args: Any, **kwargs: Any) -> int:
        """Render *spec* with :meth:`str.format` and write the result.

        Placeholders follow the usual
        ``{[argument][!conversion][:[fill]align][width][.precision][type]}``
        mini-language.
        """
        return self.write(spec.format(*args, **kwargs))

    def render(self, template: Template | str, bindings: Any) -> int:
        """Stream *template* rendered with *bindings* into the buffer."""
        if isinstance(template, str):
            template = Template(template)
        return sum(self.write(chunk) for chunk in template.chunks(bindings) if chunk)

    # ------------------------------------------------------------------
    # Flushing
    # ------------------------------------------------------------------

    def flush(self) -> None:
        """Push buffered bytes to the destination.

        Failures are logged at debug level and otherwise ignored; the
        buffer is emptied either way.
        """
        data = bytes(self._buffer)
        self._buffer.clear()
        try:
            if data:
                self._destination.write(data)
            self._destination.flush()
        except BrokenPipeError:
            self.broken_pipe = True
            logger.debug("Output consumer closed the pipe; discarding output")
        except (OSError, ValueError) as exc:
            logger.debug("Discarding output after flush failure: %s", exc)

    def release(self) -> None:
        """Flush, then stop accepting writes.  Later calls do nothing."""
        if self._released:
            return
        self.flush()
        self._released = True
