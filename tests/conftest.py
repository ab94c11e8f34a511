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
def shifted_pair():
    """Paired samples where y is x shifted up by exactly 1."""
    x = np.arange(1.0, 11.0)
    y = np.arange(2.0, 12.0)
    return x, y


@pytest.fixture
def algorithm_runs(rng):
    """Makespan-like samples for three algorithms, 30 runs each."""
    return {
        "GA": rng.normal(100.0, 5.0, size=30),
        "PSO": rng.normal(100.0, 5.0, size=30),
        "HO": rng.normal(90.0, 5.0, size=30),
    }
