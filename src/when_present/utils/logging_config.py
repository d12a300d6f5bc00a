"""Logging setup shared by the command-line entry points."""

from __future__ import annotations

import logging
import sys

from when_present.config import WHEN_PRESENT_LOG_LEVEL

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Send log records to stderr at the given level.

    Args:
        level: A logging level name or number. Defaults to
            ``WHEN_PRESENT_LOG_LEVEL``.
    """
    resolved = level if level is not None else WHEN_PRESENT_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    logging.basicConfig(
        level=resolved,
        format=_LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
