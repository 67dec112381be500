"""Utilities for the vecmetrics package."""

from . import constants
from . import helpers

__all__ = [
    "constants",
    "helpers",
]
