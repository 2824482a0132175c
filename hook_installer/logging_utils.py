"""
Logging helpers for hook-installer.

Diagnostics go through the standard logging module; user-facing messages
go through the console. Verbosity selects how much diagnostic detail is
shown on stderr.
"""

from __future__ import annotations

import logging


def verbosity_to_level(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int) -> None:
    """
    Configure the root logger based on a verbosity count.

    verbosity == 0 -> WARNING
    verbosity == 1 -> INFO
    verbosity >= 2 -> DEBUG
    """

    logging.basicConfig(
        level=verbosity_to_level(verbosity),
        format="%(levelname)s %(name)s: %(message)s",
    )
