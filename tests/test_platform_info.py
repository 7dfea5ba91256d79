"""Tests for architecture / OS identifiers (infra/platform_info.py)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from fzm.infra.platform_info import current_arch, current_os


class TestCurrentArch:
    @pytest.mark.parametrize(
        ("machine", "expected"),
        [
            ("x86_64", "x86_64"),
            ("AMD64", "x86_64"),
            ("arm64", "aarch64"),
            ("aarch64", "aarch64"),
            ("riscv64", "riscv64"),
            ("", "unknown"),
        ],
    )
    def test_normalised(self, machine: str, expected: str) -> None:
        with patch("fzm.infra.platform_info.platform.machine", return_value=machine):
            assert current_arch() == expected


class TestCurrentOs:
    @patch("fzm.infra.platform_info.platform.system", return_value="Darwin")
    def test_darwin_is_macos(self, _mock_system: MagicMock) -> None:
        assert current_os() == "macos"

    @patch("fzm.infra.platform_info.platform.system", return_value="Linux")
    def test_linux(self, _mock_system: MagicMock) -> None:
        assert current_os() == "linux"

    @patch("fzm.infra.platform_info.platform.system", return_value="Windows")
    def test_windows(self, _mock_system: MagicMock) -> None:
        assert current_os() == "windows"

    @patch("fzm.infra.platform_info.platform.system", return_value="")
    def test_unknown(self, _mock_system: MagicMock) -> None:
        assert current_os() == "unknown"
