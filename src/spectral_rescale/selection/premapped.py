"""
spectral_rescale.selection.premapped

Policy B (premapped_v0): top-N by magnitude, pre-mapped to high-res bins.

The FrequencyIndexMap is computed once over the whole low-res grid. The N
largest components are then taken in descending magnitude order and written
into a dict keyed by HIGH-res bin. When two selected low-res bins share a
high-res bin, the later (smaller or equal magnitude) one overwrites the
earlier one. That collision is accepted behavior, not an error.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..scaling import compute_scaling_cross
from ..transform import rfft_frequencies
from ..types import CrossScaling, PremappedScaling
from .interface import PREMAPPED_STRATEGY_ID, TransferResult, magnitude_ranking, resolve_order

logger = logging.getLogger(__name__)


def select_premapped(cross: CrossScaling, n: Optional[int] = None) -> PremappedScaling:
    """High-res bin -> scaling value for the n largest components (default: all)."""
    k = resolve_order(n, len(cross))
    picked: PremappedScaling = {}
    for i in magnitude_ranking(cross.scaling)[:k]:
        key = int(cross.index_map[i])
        if key in picked:
            logger.debug("low-res bin %d overwrites high-res bin %d", int(i), key)
        picked[key] = complex(cross.scaling[i])
    return picked


class PremappedSelection:
    strategy_id = PREMAPPED_STRATEGY_ID

    def transfer(
        self,
        base_spectrum: np.ndarray,
        *,
        reference_collapsed: np.ndarray,
        target_collapsed: np.ndarray,
        n_expanded: int,
        order: Optional[int],
    ) -> TransferResult:
        cross = compute_scaling_cross(rfft_frequencies(n_expanded), reference_collapsed, target_collapsed)
        k = resolve_order(order, len(cross))
        picked = select_premapped(cross, k)

        base = np.asarray(base_spectrum, dtype=complex)
        out = base.copy()
        for key, value in picked.items():
            out[key] = base[key] + value

        logger.debug(
            "%s: %d/%d components onto %d high-res bins",
            self.strategy_id, k, len(cross), len(picked),
        )
        return TransferResult(spectrum=out, applied=dict(picked), n_components=k)
