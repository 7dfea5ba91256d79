"""Tests for sub-command resolution (core/dispatcher.py).

Every test is a pure function call over an in-memory registry.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from fzm.core.dispatcher import DEFAULT_COMMAND, Dispatcher
from fzm.core.models import Command
from fzm.core.registry import CommandRegistry


@pytest.fixture()
def dispatcher(make_command: Callable[..., Command]) -> Dispatcher:
    registry = CommandRegistry()
    for name in ["help", "version", "install", "list", "list-remote"]:
        registry.register(make_command(name))
    return Dispatcher(registry)


# ---------------------------------------------------------------------------
# requested_name / arguments
# ---------------------------------------------------------------------------

class TestRequestedName:
    def test_default_is_help(self) -> None:
        assert DEFAULT_COMMAND == "help"

    @pytest.mark.parametrize("argv", [[], ["fzm"]])
    def test_missing_token_defaults(self, argv: list[str]) -> None:
        assert Dispatcher.requested_name(argv) == "help"

    def test_program_path_skipped(self) -> None:
        assert Dispatcher.requested_name(["/usr/local/bin/fzm", "install", "0.11.0"]) == "install"

    def test_arguments_after_command(self) -> None:
        assert Dispatcher.arguments(["fzm", "install", "0.11.0", "--force"]) == ["0.11.0", "--force"]

    @pytest.mark.parametrize("argv", [[], ["fzm"], ["fzm", "help"]])
    def test_arguments_empty(self, argv: list[str]) -> None:
        assert Dispatcher.arguments(argv) == []


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------

class TestResolve:
    def test_exact_match_returns_index(self, dispatcher: Dispatcher) -> None:
        # sorted: help, install, list, list-remote, version
        assert dispatcher.resolve(["fzm", "list-remote"]) == 3

    @pytest.mark.parametrize("argv", [[], ["fzm"]])
    def test_absent_command_same_as_help(self, dispatcher: Dispatcher, argv: list[str]) -> None:
        assert dispatcher.resolve(argv) == dispatcher.resolve(["fzm", "help"])

    def test_unknown_command_is_none(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.resolve(["fzm", "bogus"]) is None

    def test_flags_are_not_commands(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.resolve(["fzm", "--help"]) is None

    def test_only_first_token_consumed(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.resolve(["fzm", "bogus", "install"]) is None

    def test_sees_commands_registered_later(
        self, dispatcher: Dispatcher, make_command: Callable[..., Command]
    ) -> None:
        assert dispatcher.resolve(["fzm", "use"]) is None
        dispatcher._registry.register(make_command("use"))
        assert dispatcher.resolve(["fzm", "use"]) == 4
