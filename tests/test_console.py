"""Regression tests for the error-boundary console (cli/console.py).

Rich is the preferred renderer, but a missing Rich install must not
turn an error report into a second crash.
"""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from fzm.cli import exit_codes
from fzm.cli.app import cli
from fzm.cli.console import console, get_rich_console
from fzm.exceptions import EnvironmentError, FzmError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def test_rich_console_targets_stderr() -> None:
    assert get_rich_console().stderr is True


def test_missing_rich_raises_environment_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_plain_fallback_strips_markup(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)
    console.print("[bold red]Error:[/bold red] boom")
    assert capsys.readouterr().err == "Error: boom\n"


def test_error_boundary_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)
    with patch("fzm.cli.app.main", side_effect=FzmError("boom", hint="try this")):
        with pytest.raises(SystemExit) as exc_info:
            cli()

    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert capsys.readouterr().err == "Error: boom\nHint: try this\n"
