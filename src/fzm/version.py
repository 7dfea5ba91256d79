"""Embedded version string.

The version lives in the packaged ``VERSION`` text file so release
tooling can bump it without touching Python sources.  Surrounding
whitespace and newlines are trimmed.
"""

from __future__ import annotations

from importlib.resources import files


def _read_version() -> str:
    return files("fzm").joinpath("VERSION").read_text(encoding="utf-8").strip()


__version__: str = _read_version()
