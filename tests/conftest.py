"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def one_to_ten():
    """The integers 1..10, shuffled, as floats."""
    return [7.0, 4.0, 1.0, 5.0, 3.0, 10.0, 6.0, 2.0, 8.0, 9.0]


@pytest.fixture
def normal_samples(rng):
    """500 draws from N(2, 3^2)."""
    return rng.normal(loc=2.0, scale=3.0, size=500)


@pytest.fixture
def skewed_samples(rng):
    """300 draws from a right-skewed exponential distribution."""
    return rng.exponential(scale=2.0, size=300)
