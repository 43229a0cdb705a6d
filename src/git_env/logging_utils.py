"""Logging setup for the git-env CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def verbosity_level(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level.

    0 -> WARNING, 1 -> INFO, 2 or more -> DEBUG
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr through Rich at the requested verbosity."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(
        level=verbosity_level(verbosity),
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
