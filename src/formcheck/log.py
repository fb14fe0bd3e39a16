"""Logging setup: one Rich handler on the package logger."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "formcheck"


def configure_logging(level: str | int = "INFO", console: Console | None = None) -> logging.Logger:
    """Install a RichHandler on the formcheck logger, replacing any earlier one.

    Args:
        level: Logging level name or number.
        console: Rich Console to write to. Defaults to stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
