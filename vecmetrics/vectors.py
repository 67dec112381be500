"""Distances and similarity measures for vectors of 32-bit floats.

Every function accepts two sequences of samples (lists, tuples or numpy
arrays), reconciles their lengths with `reconcile` and accumulates over the
shared prefix in single precision, left to right. Sums are taken with
`numpy.add.accumulate`, which adds sequentially rather than pairwise.

None of them raise for degenerate input: empty sequences, constant
sequences, overflowing samples and unusual orders produce `0.0` or let
`nan`/`inf` propagate. Floating-point errors are ignored inside every
function, whatever the caller's `numpy.seterr` settings are.
"""

import typing

import numpy

from .utils import helpers

logger = helpers.make_logger(__name__)

Samples = typing.Union[typing.Sequence[float], numpy.ndarray]

_ZERO = numpy.float32(0.0)
_ONE = numpy.float32(1.0)


def _quiet() -> numpy.errstate:
    """Ignore overflow, invalid operations and division by zero."""
    return numpy.errstate(over="ignore", invalid="ignore", divide="ignore")


def _running_sum(values: numpy.ndarray) -> numpy.float32:
    """Sum `values` from left to right in single precision."""
    if len(values) == 0:
        return _ZERO
    return numpy.add.accumulate(values, dtype=numpy.float32)[-1]


def reconcile(x: Samples, y: Samples) -> tuple[numpy.ndarray, numpy.ndarray]:
    """Truncate two sequences to their shared minimum length.

    Trailing samples of the longer sequence are dropped. The inputs are never
    modified; the returned arrays are `float32` views of them where possible.

    Args:
        x: The first sequence of samples.
        y: The second sequence of samples.

    Returns:
        The two sequences as `float32` arrays of equal length.
    """
    with _quiet():
        x = numpy.asarray(x, dtype=numpy.float32)
        y = numpy.asarray(y, dtype=numpy.float32)
    x_len, y_len = len(x), len(y)
    if x_len != y_len:
        end = min(x_len, y_len)
        logger.debug(f"Truncating inputs of lengths {x_len} and {y_len} to {end}.")
        x, y = x[:end], y[:end]
    return x, y


def manhattan(x: Samples, y: Samples) -> numpy.float32:
    """Manhattan distance between two vectors."""
    x, y = reconcile(x, y)
    with _quiet():
        return _running_sum(numpy.abs(x - y))


def euclidean(x: Samples, y: Samples) -> numpy.float32:
    """Euclidean distance between two vectors.

    This is the Minkowski distance of order 2, computed without the general
    power function.
    """
    x, y = reconcile(x, y)
    with _quiet():
        d = x - y
        return numpy.sqrt(_running_sum(d * d))


def minkowski(x: Samples, y: Samples, r: float) -> numpy.float32:
    """Minkowski distance of order `r` between two vectors.

    Order 1 is the Manhattan distance and order 2 the Euclidean distance.
    Large orders approach the Chebyshev distance.

    `r` is not validated. A zero, negative or non-finite order yields
    whatever single-precision exponentiation produces, including `nan` and
    `inf`.

    Args:
        x: The first sequence of samples.
        y: The second sequence of samples.
        r: The order of the distance.

    Returns:
        `(sum |x_i - y_i|^r)^(1/r)`, or the raw sum when it is not positive.
    """
    x, y = reconcile(x, y)
    with _quiet():
        r = numpy.float32(r)
        distance = _running_sum(numpy.abs(x - y) ** r)

        # Never raise 0.0 to 1 / r.
        if distance > _ZERO:
            distance = distance ** (_ONE / r)
    return distance


def chebyshev(x: Samples, y: Samples) -> numpy.float32:
    """Chebyshev (supremum) distance between two vectors."""
    x, y = reconcile(x, y)
    with _quiet():
        return numpy.max(numpy.abs(x - y), initial=_ZERO)


def pearson(x: Samples, y: Samples) -> numpy.float32:
    """Pearson correlation coefficient between two vectors.

    This uses the single-pass sum-of-products formula. When the denominator
    is not positive it is returned as-is: `0.0` when either vector has zero
    variance and `nan` for empty input, since `0 / 0` appears under the
    square roots.

    Args:
        x: The first sequence of samples.
        y: The second sequence of samples.

    Returns:
        The correlation coefficient, in `[-1, 1]` for non-degenerate input.
    """
    x, y = reconcile(x, y)

    with _quiet():
        n = _running_sum(numpy.ones(len(x), dtype=numpy.float32))
        sum_xy = _running_sum(x * y)
        sum_x = _running_sum(x)
        sum_y = _running_sum(y)
        sum_x2 = _running_sum(x * x)
        sum_y2 = _running_sum(y * y)

        denominator = numpy.sqrt(sum_x2 - sum_x * sum_x / n) * numpy.sqrt(
            sum_y2 - sum_y * sum_y / n,
        )
        if denominator > _ZERO:
            return (sum_xy - sum_x * sum_y / n) / denominator
        return denominator


__all__ = [
    "Samples",
    "reconcile",
    "manhattan",
    "euclidean",
    "minkowski",
    "chebyshev",
    "pearson",
]
