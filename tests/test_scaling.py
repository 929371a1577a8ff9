import numpy as np
import pytest

from spectral_rescale.errors import EmptyFrequencyDomain, ShapeMismatch
from spectral_rescale.scaling import compute_scaling, compute_scaling_cross
from spectral_rescale.transform import forward, rfft_frequencies


def test_scaling_is_spectrum_difference(rng):
    a = rng.normal(size=12)
    b = rng.normal(size=12)
    assert np.allclose(compute_scaling(a, b), forward(b) - forward(a))


def test_identical_inputs_give_zero_scaling(rng):
    a = rng.normal(size=9)
    assert np.all(compute_scaling(a, a.copy()) == 0)


def test_dc_shift_concentrates_in_bin_zero(dc_pair):
    ref, tgt = dc_pair
    s = compute_scaling(ref, tgt)
    assert s.shape == (3,)
    assert s[0] == pytest.approx(1.0)
    assert np.allclose(s[1:], 0.0)


def test_length_mismatch():
    with pytest.raises(ShapeMismatch):
        compute_scaling(np.zeros(4), np.zeros(5))


def test_cross_scaling_carries_index_map(dc_pair):
    ref, tgt = dc_pair
    cross = compute_scaling_cross(rfft_frequencies(8), ref, tgt)
    assert len(cross) == 3
    assert cross.index_map.tolist() == [0, 2, 4]
    assert np.allclose(cross.scaling, compute_scaling(ref, tgt))


def test_cross_scaling_empty_high_res_grid(dc_pair):
    ref, tgt = dc_pair
    with pytest.raises(EmptyFrequencyDomain):
        compute_scaling_cross(np.array([]), ref, tgt)
