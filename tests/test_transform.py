"""
Unit tests for the normalized real FFT pair.
"""
import numpy as np
import pytest

from spectral_rescale.errors import EmptyFrequencyDomain, InvalidSpectrumLength, ShapeMismatch
from spectral_rescale.transform import forward, inverse, n_bins, rfft_frequencies


class TestForward:

    @pytest.mark.parametrize("n", [1, 2, 7, 8, 31, 64])
    def test_bin_count(self, n, rng):
        assert forward(rng.normal(size=n)).shape == (n // 2 + 1,)
        assert n_bins(n) == n // 2 + 1

    def test_dc_bin_is_mean(self, rng):
        x = rng.normal(size=20)
        assert forward(x)[0] == pytest.approx(np.mean(x))

    def test_normalized_amplitude(self, sine8):
        X = forward(sine8)
        # sin = (e^{iθ} - e^{-iθ}) / 2i -> one-sided bin carries -i/2
        assert X[1] == pytest.approx(-0.5j)
        assert np.allclose(np.delete(X, 1), 0.0)

    def test_empty_rejected(self):
        with pytest.raises(EmptyFrequencyDomain):
            forward([])

    def test_multichannel_rejected(self):
        with pytest.raises(ShapeMismatch):
            forward(np.zeros((4, 2)))

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError):
            forward([0.0, np.nan, 1.0])


class TestInverse:

    @pytest.mark.parametrize("n", [2, 4, 16, 100])
    def test_round_trip_even(self, n, rng):
        x = rng.normal(size=n)
        assert np.allclose(inverse(forward(x)), x)

    @pytest.mark.parametrize("n", [3, 5, 17, 99])
    def test_round_trip_odd_with_explicit_length(self, n, rng):
        x = rng.normal(size=n)
        y = inverse(forward(x), n)
        assert y.shape == (n,)
        assert np.allclose(y, x)

    def test_default_length(self):
        assert inverse(np.zeros(5, dtype=complex)).shape == (8,)

    def test_dc_bin_shifts_every_sample(self, sine8):
        X = forward(sine8)
        X[0] += 0.75
        assert np.allclose(inverse(X), sine8 + 0.75)

    @pytest.mark.parametrize("k", [0, 1])
    def test_too_short(self, k):
        with pytest.raises(InvalidSpectrumLength):
            inverse(np.zeros(k, dtype=complex))

    def test_inconsistent_length(self):
        with pytest.raises(InvalidSpectrumLength):
            inverse(np.zeros(5, dtype=complex), 12)


def test_frequency_grid():
    assert np.allclose(rfft_frequencies(8), [0.0, 0.125, 0.25, 0.375, 0.5])
    assert np.allclose(rfft_frequencies(5), [0.0, 0.2, 0.4])
    with pytest.raises(EmptyFrequencyDomain):
        rfft_frequencies(0)
