"""Constants used in the vecmetrics package."""

import logging
import os

LOG_LEVEL = getattr(logging, os.environ.get("VECMETRICS_LOG", "INFO"))
DEFAULT_MINKOWSKI_ORDER = float(os.environ.get("VECMETRICS_MINKOWSKI_ORDER", "3"))
