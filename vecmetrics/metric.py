"""This module defines the `Metric` class and a registry of vector metrics."""

import abc
import typing

import numpy

from . import vectors
from .utils import constants
from .utils import helpers

logger = helpers.make_logger(__name__)

METRICS = typing.Literal[
    "chebyshev",
    "euclidean",
    "manhattan",
    "minkowski",
    "pearson",
]

_FUNCTIONS: dict[str, typing.Callable[..., numpy.float32]] = {
    "chebyshev": vectors.chebyshev,
    "euclidean": vectors.euclidean,
    "manhattan": vectors.manhattan,
    "minkowski": vectors.minkowski,
    "pearson": vectors.pearson,
}


class Metric(abc.ABC):
    """This represents a general distance or similarity measure.

    Mathematically, this is a function, `f`, with:
        - scalar-valued: `f(x, y)` is a Real number (or `nan`) for all `x` and `y`
        - symmetry: `f(x, y)` = `f(y, x)`

    The distances among the registered metrics are also non-negative and have
    `f(x, x)` = 0. The Pearson correlation is a similarity in `[-1, 1]`.
    """

    def __init__(self, name: str) -> None:
        """Initialize the `Metric`."""
        self.name = name

    def __eq__(self, other: object) -> bool:
        """Check if two metrics are identical."""
        if not isinstance(other, Metric):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        """Hash the metric by its name."""
        return hash(self.name)

    def __str__(self) -> str:
        """Return a string representation of the metric."""
        return self.name

    def __repr__(self) -> str:
        """Return a string representation of the metric."""
        return self.name

    def __call__(self, left: typing.Any, right: typing.Any) -> float:  # noqa: ANN401
        """Compute the value of the metric between `left` and `right`."""
        return self.one_to_one(left, right)

    @abc.abstractmethod
    def one_to_one(self, left: typing.Any, right: typing.Any) -> float:  # noqa: ANN401
        """Compute the value of the metric between `left` and `right`."""
        pass


class VectorMetric(Metric):
    """Wraps one of the functions in `vecmetrics.vectors`.

    The `minkowski` metric takes its order as the `r` keyword argument and
    falls back to `constants.DEFAULT_MINKOWSKI_ORDER`. The order is part of
    the name, so Minkowski metrics of different orders are not equal.
    """

    def __init__(self, name: METRICS, r: typing.Optional[float] = None) -> None:
        """Initialize the `VectorMetric`."""
        if name not in typing.get_args(METRICS):
            msg = f"`name` must be one of {typing.get_args(METRICS)}. Got {name} instead"
            raise ValueError(
                msg,
            )
        if name != "minkowski" and r is not None:
            msg = f"Only the `minkowski` metric takes an order. Got r={r} for {name}"
            raise ValueError(
                msg,
            )

        self.function = _FUNCTIONS[name]
        self.r: typing.Optional[float] = None
        if name == "minkowski":
            self.r = constants.DEFAULT_MINKOWSKI_ORDER if r is None else float(r)
            super().__init__(f"{name}-{self.r}")
        else:
            super().__init__(name)

        logger.debug(f"Created metric {self.name}.")

    def one_to_one(self, left: vectors.Samples, right: vectors.Samples) -> float:
        """Compute the value of the metric between `left` and `right`."""
        if self.r is None:
            return self.function(left, right)
        return self.function(left, right, self.r)


def get(name: METRICS, r: typing.Optional[float] = None) -> VectorMetric:
    """Return the metric registered under `name`."""
    return VectorMetric(name, r)


__all__ = [
    "METRICS",
    "Metric",
    "VectorMetric",
    "get",
]
