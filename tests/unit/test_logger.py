"""Unit tests for logger.py"""

import logging

import pytest
from rich.logging import RichHandler

from llmstxt_gen.logger import LOGGER_NAME, init_logging


@pytest.mark.parametrize("verbose,level", [
    (False, logging.WARNING),
    (True, logging.INFO),
])
def test_init_logging_level(verbose, level):
    """Verbose selects INFO, otherwise WARNING."""
    logger = init_logging(verbose)
    assert logger.name == LOGGER_NAME
    assert logger.level == level


def test_init_logging_replaces_handlers():
    """Repeated calls leave exactly one RichHandler attached."""
    init_logging()
    logger = init_logging(True)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.propagate is False


def test_module_loggers_are_children():
    """Module loggers inherit the package logger configuration."""
    init_logging(True)
    child = logging.getLogger("llmstxt_gen.core.pipeline")
    assert child.getEffectiveLevel() == logging.INFO
