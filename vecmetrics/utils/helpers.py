"""Helper functions for the package."""

import logging

from . import constants


def make_logger(name: str) -> logging.Logger:
    """Create a logger with the given name."""
    logger = logging.getLogger(name)
    logger.setLevel(constants.LOG_LEVEL)
    return logger
