"""Logging setup for applications embedding the interpreter."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "flowtree"


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send flowtree logs to stderr through a rich handler.

    Calling this again replaces the handler installed by a previous call.

    Args:
        verbose: Log at DEBUG level (frames, API calls, returns) instead of INFO.

    Returns:
        The package logger.

    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(log_level)
    return logger
