"""
Unit tests for the two component selection strategies.
"""
import numpy as np
import pytest

from spectral_rescale.errors import OrderOutOfRange
from spectral_rescale.selection import (
    PREMAPPED_STRATEGY_ID,
    RANKED_STRATEGY_ID,
    STRATEGY_IDS,
    PremappedSelection,
    RankedSelection,
    get_strategy,
    rank_components,
    resolve_order,
    select_premapped,
    select_ranked,
)
from spectral_rescale.types import CrossScaling


SCALING = np.array([0.1 + 0j, 3.0j, -2.0 + 0j, 0.5 + 0.5j, 3.0 + 0j])


class TestResolveOrder:

    def test_none_means_all(self):
        assert resolve_order(None, 5) == 5

    @pytest.mark.parametrize("order", [0, 3, 5, np.int64(2)])
    def test_in_range(self, order):
        assert resolve_order(order, 5) == int(order)

    @pytest.mark.parametrize("order", [6, -1, 2.0, True, "3"])
    def test_rejected(self, order):
        with pytest.raises(OrderOutOfRange):
            resolve_order(order, 5)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match=r"\[0, 5\]"):
            resolve_order(9, 5)


class TestRanked:

    def test_descending_magnitude_with_stable_ties(self):
        ranked = rank_components(SCALING)
        # |3j| == |3| -> lower bin first
        assert ranked.bins() == (1, 4, 2, 3, 0)
        mags = [c.magnitude() for c in ranked.components]
        assert mags == sorted(mags, reverse=True)

    def test_truncation(self):
        sel = select_ranked(SCALING, 2)
        assert sel.bins() == (1, 4)
        assert sel.components[1].value == 3.0

    def test_default_keeps_all(self):
        assert len(select_ranked(SCALING)) == SCALING.size

    def test_order_zero(self):
        assert len(select_ranked(SCALING, 0)) == 0

    def test_out_of_range(self):
        with pytest.raises(OrderOutOfRange):
            select_ranked(SCALING, 6)

    def test_colliding_components_accumulate(self):
        # 8 low-res samples (5 bins) onto 4 high-res samples (3 bins)
        base = np.zeros(3, dtype=complex)
        ref = np.zeros(8)
        tgt = np.cos(2.0 * np.pi * np.arange(8) / 8.0)  # bin 1 only, value 0.5
        tgt = tgt + np.cos(2.0 * np.pi * 2 * np.arange(8) / 8.0)  # bin 2, value 0.5
        res = RankedSelection().transfer(
            base, reference_collapsed=ref, target_collapsed=tgt, n_expanded=4, order=None
        )
        # low-res f = 0.125 ties 0.0 / 0.25 -> bin 0; f = 0.25 -> bin 1
        assert res.n_components == 5
        assert res.spectrum[0] == pytest.approx(0.5)
        assert res.spectrum[1] == pytest.approx(0.5)
        assert np.all(base == 0)


class TestPremapped:

    def test_keys_are_high_res_bins(self):
        cross = CrossScaling(scaling=SCALING, index_map=np.array([0, 2, 4, 6, 8]))
        picked = select_premapped(cross, 3)
        assert set(picked) == {2, 8, 4}
        assert picked[2] == 3.0j
        assert picked[8] == 3.0

    def test_collision_later_overwrites(self):
        cross = CrossScaling(
            scaling=np.array([1.0 + 0j, 5.0 + 0j, 2.0 + 0j]),
            index_map=np.array([0, 1, 1]),
        )
        picked = select_premapped(cross)
        # bin 1 (|5|) is extracted first, bin 2 (|2|) later and overwrites it
        assert picked == {1: 2.0 + 0j, 0: 1.0 + 0j}

    def test_out_of_range(self):
        cross = CrossScaling(scaling=SCALING, index_map=np.arange(5))
        with pytest.raises(OrderOutOfRange):
            select_premapped(cross, 6)

    def test_transfer_adds_to_base(self):
        base = np.array([1.0, 2.0, 3.0], dtype=complex)
        res = PremappedSelection().transfer(
            base,
            reference_collapsed=np.ones(4),
            target_collapsed=np.full(4, 3.0),
            n_expanded=4,
            order=1,
        )
        assert list(res.applied) == [0]
        assert res.applied[0] == pytest.approx(2.0)
        assert np.allclose(res.spectrum, [3.0, 2.0, 3.0])
        assert np.allclose(base, [1.0, 2.0, 3.0])


def test_registry():
    assert STRATEGY_IDS == (RANKED_STRATEGY_ID, PREMAPPED_STRATEGY_ID)
    assert isinstance(get_strategy("ranked_v0"), RankedSelection)
    assert isinstance(get_strategy("premapped_v0"), PremappedSelection)
    with pytest.raises(ValueError, match="Unsupported strategy_id"):
        get_strategy("nearest")
