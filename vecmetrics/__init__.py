"""A package for computing distances and correlations between vectors."""

from . import metric
from . import utils
from . import vectors
from .metric import Metric
from .metric import VectorMetric
from .vectors import chebyshev
from .vectors import euclidean
from .vectors import manhattan
from .vectors import minkowski
from .vectors import pearson
from .vectors import reconcile

__all__ = [
    "metric",
    "utils",
    "vectors",
    "Metric",
    "VectorMetric",
    "chebyshev",
    "euclidean",
    "manhattan",
    "minkowski",
    "pearson",
    "reconcile",
]

__version__ = "0.1.0"
