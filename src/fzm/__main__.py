"""Allow ``python -m fzm`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m fzm`` behaves identically to the ``fzm`` console
script.
"""

from __future__ import annotations

from fzm.cli.app import cli

if __name__ == "__main__":
    cli()
