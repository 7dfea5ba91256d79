"""Logging configuration for the ``fzm`` command.

Diagnostics go to stderr through a single handler attached to the
``fzm`` logger, leaving the root logger alone for embedding callers.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME: str = "fzm"

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Install a stderr handler on the ``fzm`` logger at *level*.

    Calling it again replaces the previous handler instead of stacking
    a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
