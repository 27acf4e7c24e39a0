"""Rich log output for the stepper package.

Only the ``stepper`` logger is touched, so host applications keep their
own logging setup.
"""

import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "stepper"


def configure_logging(
    level: int = logging.INFO,
    stream: TextIO = sys.stderr,
    no_color: bool = False,
    rich_tracebacks: bool = False,
) -> Console:
    """Send stepper logs to a rich console.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Minimum level for stepper logs (DEBUG shows recompute passes)
        stream: Output stream for logs
        no_color: Disable colored output
        rich_tracebacks: Format exceptions logged by stepper with rich

    Returns:
        Console the handler writes to
    """
    console = Console(file=stream, no_color=no_color)
    handler = RichHandler(
        console=console,
        show_time=level <= logging.DEBUG,
        show_path=level <= logging.DEBUG,
        rich_tracebacks=rich_tracebacks,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    for existing in logger.handlers[:]:
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return console
