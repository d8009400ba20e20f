"""Logging setup for the detect-agent CLI.

Log records go to stderr through Rich so they never mix with the results
printed on stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "detect_agent"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Calling this again replaces the previous handler.

    Args:
        debug: Log at DEBUG instead of WARNING.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=debug,
        show_path=debug,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
