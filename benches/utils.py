"""Utilities for the benchmarks."""

import numpy


def data_f32(dim: int) -> numpy.ndarray:
    """Return two random vectors of the given dimension."""
    rng = numpy.random.default_rng()
    return rng.random((2, dim)).astype(numpy.float32)
