"""Shared pytest fixtures and configuration for the fzm test suite.

Guidelines
----------
* No real terminal; destinations are in-memory byte buffers.
* No network access in any test.
* Tests must not depend on the caller's environment (``NO_COLOR`` etc.);
  pass an explicit ``environ`` mapping instead.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator, Sequence

import pytest

from fzm.core.models import AppIdentity, Command
from fzm.core.protocols import CommandContext


class FakeDestination(io.BytesIO):
    """Byte sink that can pretend to be a TTY or a closed pipe."""

    def __init__(self, *, tty: bool = False, broken: bool = False) -> None:
        super().__init__()
        self.tty = tty
        self.broken = broken
        self.flush_count = 0

    def isatty(self) -> bool:
        return self.tty

    def flush(self) -> None:
        self.flush_count += 1
        if self.broken:
            raise BrokenPipeError(32, "Broken pipe")
        super().flush()


@pytest.fixture()
def make_destination() -> Callable[..., FakeDestination]:
    return FakeDestination


@pytest.fixture()
def identity() -> AppIdentity:
    return AppIdentity(
        name="fzm",
        version="1.2.3",
        description="A fast and simple Zig version manager, built in Zig",
        author="Matthew Winter",
        copyright="Copyright © 2023 Matthew Winter",
        arch="x86_64",
        os="linux",
    )


@pytest.fixture()
def make_command() -> Callable[..., Command]:
    def factory(name: str, description: str = "", code: int = 0) -> Command:
        def handler(context: CommandContext, args: Sequence[str]) -> int:
            return code

        return Command(name=name, handler=handler, description=description or f"{name} command")

    return factory


@pytest.fixture(autouse=True)
def _restore_fzm_logger() -> Iterator[None]:
    """``main()`` configures the ``fzm`` logger; undo it after each test."""
    logger = logging.getLogger("fzm")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
