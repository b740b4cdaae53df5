"""
Pytest configuration and shared fixtures for decibel-ratio tests.
"""
import numpy as np
import pytest


# Use np.random.Generator for better test isolation instead of global seed
_TEST_SEED = 42


@pytest.fixture(params=[np.float32, np.float64], ids=["float32", "float64"])
def float_dtype(request):
    """Each supported floating-point precision."""
    return request.param


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(_TEST_SEED)


@pytest.fixture
def positive_amplitudes(rng):
    """Positive amplitudes spanning -120 dB to +120 dB."""
    return 10.0 ** rng.uniform(-6.0, 6.0, size=256)
