"""Logging setup for command-line entry points."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_handler: RichHandler | None = None


def setup_logging(level: str | int = "WARNING") -> logging.Logger:
    """
    Send ``termiart`` log records to stderr through rich.

    Safe to call repeatedly; later calls only change the level.
    """
    global _handler

    logger = logging.getLogger("termiart")
    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(_handler)
        logger.propagate = False

    logger.setLevel(level)
    return logger
