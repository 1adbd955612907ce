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
def linear_data():
    """y = 2x exactly."""
    return np.array([1.0, 2.0, 3.0]), np.array([2.0, 4.0, 6.0])


@pytest.fixture
def noisy_linear_data(rng):
    """y = 3 + 0.5 x + noise, n = 50."""
    x = np.linspace(0.0, 10.0, 50)
    y = 3.0 + 0.5 * x + rng.standard_normal(50) * 0.4
    return x, y
