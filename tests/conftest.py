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
    """The integers 1..10 as floats."""
    return np.arange(1.0, 11.0)


@pytest.fixture
def normal_sample(rng):
    """100 draws from N(50, 10)."""
    return rng.normal(50.0, 10.0, 100)


@pytest.fixture
def skewed_sample(rng):
    """200 draws from an exponential distribution (clearly non-normal)."""
    return rng.exponential(1.0, 200)


@pytest.fixture
def linear_data(rng):
    """y = 1 + 2x plus small noise, 50 points."""
    x = np.linspace(0.0, 10.0, 50)
    y = 1.0 + 2.0 * x + rng.normal(0.0, 0.5, 50)
    return x, y
