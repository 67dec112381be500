"""Benchmark the vector distances against SciPy."""

import numpy
import scipy.spatial.distance as scipy_distance
import scipy.stats as scipy_stats
import utils  # type: ignore[import]
from vecmetrics import vectors

DIM = 1_000
NUM_RUNS = 100


def scipy_chebyshev() -> None:
    """Benchmark the SciPy implementation of the Chebyshev distance."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        scipy_distance.chebyshev(a, b)


def vm_chebyshev() -> None:
    """Benchmark the vecmetrics implementation of the Chebyshev distance."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        vectors.chebyshev(a, b)


def scipy_euclidean() -> None:
    """Benchmark the SciPy implementation of the Euclidean distance."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        scipy_distance.euclidean(a, b)


def vm_euclidean() -> None:
    """Benchmark the vecmetrics implementation of the Euclidean distance."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        vectors.euclidean(a, b)


def scipy_l3_distance() -> None:
    """Benchmark the SciPy implementation of the L3 distance."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        scipy_distance.minkowski(a, b, 3)


def vm_l3_distance() -> None:
    """Benchmark the vecmetrics implementation of the L3 distance."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        vectors.minkowski(a, b, 3.0)


def scipy_manhattan() -> None:
    """Benchmark the SciPy implementation of the Manhattan distance."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        scipy_distance.cityblock(a, b)


def vm_manhattan() -> None:
    """Benchmark the vecmetrics implementation of the Manhattan distance."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        vectors.manhattan(a, b)


def scipy_pearson() -> None:
    """Benchmark the SciPy implementation of the Pearson correlation."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        scipy_stats.pearsonr(a, b)


def vm_pearson() -> None:
    """Benchmark the vecmetrics implementation of the Pearson correlation."""
    data: numpy.ndarray = utils.data_f32(DIM)
    a, b = data[0], data[1]

    for _ in range(NUM_RUNS):
        vectors.pearson(a, b)


__benchmarks__ = [
    (scipy_chebyshev, vm_chebyshev, "Chebyshev, f32"),
    (scipy_euclidean, vm_euclidean, "Euclidean, f32"),
    (scipy_l3_distance, vm_l3_distance, "L3, f32"),
    (scipy_manhattan, vm_manhattan, "Manhattan, f32"),
    (scipy_pearson, vm_pearson, "Pearson, f32"),
]
