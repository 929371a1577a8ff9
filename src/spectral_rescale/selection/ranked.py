"""
spectral_rescale.selection.ranked

Policy A (ranked_v0): order-truncated, sorted by descending magnitude.

- scaling components are kept keyed by LOW-res bin, as an explicit ordered
  tuple (RankedScaling)
- the first `order` components are retained
- each retained bin is matched to its nearest high-res bin only when the
  component is applied; components landing on the same high-res bin add up
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np

from ..matching import frequency_index_map
from ..scaling import compute_scaling
from ..types import Array, Component, RankedScaling
from .interface import RANKED_STRATEGY_ID, TransferResult, magnitude_ranking, resolve_order

logger = logging.getLogger(__name__)


def rank_components(scaling: Array) -> RankedScaling:
    """All components of a scaling vector, largest magnitude first."""
    s = np.asarray(scaling, dtype=complex)
    return RankedScaling(
        components=tuple(Component(bin=int(i), value=complex(s[i])) for i in magnitude_ranking(s))
    )


def select_ranked(scaling: Array, order: Optional[int] = None) -> RankedScaling:
    """Top `order` components (default: all) of a low-res scaling vector."""
    ranked = rank_components(scaling)
    k = resolve_order(order, len(ranked))
    return ranked.head(k)


class RankedSelection:
    strategy_id = RANKED_STRATEGY_ID

    def transfer(
        self,
        base_spectrum: np.ndarray,
        *,
        reference_collapsed: np.ndarray,
        target_collapsed: np.ndarray,
        n_expanded: int,
        order: Optional[int],
    ) -> TransferResult:
        scaling = compute_scaling(reference_collapsed, target_collapsed)
        selected = select_ranked(scaling, order)

        index_map = frequency_index_map(np.asarray(reference_collapsed).size, n_expanded)

        out = np.array(base_spectrum, dtype=complex, copy=True)
        applied: Dict[int, complex] = {}
        for comp in selected.components:
            k = int(index_map[comp.bin])
            out[k] += comp.value
            applied[k] = applied.get(k, 0j) + comp.value

        logger.debug(
            "%s: %d/%d components onto %d high-res bins",
            self.strategy_id, len(selected), scaling.size, len(applied),
        )
        return TransferResult(spectrum=out, applied=applied, n_components=len(selected))
