"""
Pytest fixtures for spectral_rescale tests.
"""
import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def sine8():
    """8 samples of a pure sine at frequency bin 1."""
    i = np.arange(8, dtype=float)
    return np.sin(2.0 * np.pi * i / 8.0)


@pytest.fixture
def dc_pair():
    """(reference_collapsed, target_collapsed) differing only by a DC shift of 1."""
    return np.ones(4), np.full(4, 2.0)
