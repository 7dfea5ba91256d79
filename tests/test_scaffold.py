"""Smoke tests: verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible and trimmed.
* Exit codes are defined.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from fzm import __version__
from fzm.cli import exit_codes
from fzm.cli.app import main
from fzm.exceptions import (
    CommandUnavailableError,
    ConfigurationError,
    DuplicateCommandError,
    EnvironmentError,
    FzmError,
    StreamReleasedError,
    TemplateSyntaxError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_trimmed(self) -> None:
        assert __version__ == __version__.strip()

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationError,
            DuplicateCommandError,
            TemplateSyntaxError,
            StreamReleasedError,
            CommandUnavailableError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(self, exc_class: type[FzmError]) -> None:
        assert issubclass(exc_class, FzmError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(FzmError, Exception)

    def test_hint_is_stored(self) -> None:
        err = FzmError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert FzmError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, make_destination: Callable[..., Any]) -> None:
        code = main([], environ={}, stdout=make_destination(), stderr=make_destination())
        assert code == exit_codes.SUCCESS

    def test_version_returns_success(self, make_destination: Callable[..., Any]) -> None:
        code = main(["version"], environ={}, stdout=make_destination(), stderr=make_destination())
        assert code == exit_codes.SUCCESS

    def test_invalid_environment_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            main([], environ={"FZM_COLOR": "rainbow"})
