"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pycora.core.numbers import F32, F64
from pycora.linalg import DenseVector, ListVector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=[DenseVector, ListVector], ids=['dense', 'list'])
def vector_cls(request):
    """Every concrete vector container."""
    return request.param


@pytest.fixture(params=[F64, F32], ids=['f64', 'f32'])
def real(request):
    """Both precisions."""
    return request.param


@pytest.fixture
def gaussian_data(rng):
    """200 draws with non-trivial mean and spread."""
    return rng.normal(loc=3.0, scale=2.5, size=200)
