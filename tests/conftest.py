"""Pytest configuration file."""

import numpy
import pytest

MAX_DIM = 3
PARAMS = [10**i for i in range(1, MAX_DIM + 1)]
IDS = [f"10^{i}" for i in range(1, MAX_DIM + 1)]


def gen_data(car: int, dim: int) -> numpy.ndarray:
    """Generate random data."""
    rng = numpy.random.default_rng()
    return rng.random((car, dim))


@pytest.fixture(params=PARAMS, ids=IDS)
def data_f32(request: pytest.FixtureRequest) -> numpy.ndarray:
    """Return two random vectors of the given dimension."""
    dim: int = request.param
    return gen_data(2, dim).astype(numpy.float32)
