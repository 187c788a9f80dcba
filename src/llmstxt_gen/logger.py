"""Console logging setup for the CLI"""

import logging

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "llmstxt_gen"


def init_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr RichHandler to the package logger.

    INFO and above with verbose, WARNING and above otherwise. Safe to call
    more than once; existing handlers are replaced.
    """
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_level=True,
        show_path=False,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False  # Prevent double logging
    logger.handlers.clear()
    logger.addHandler(console_handler)
    return logger
