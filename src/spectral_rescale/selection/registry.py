# FILE: src/spectral_rescale/selection/registry.py
from __future__ import annotations

from .interface import PREMAPPED_STRATEGY_ID, RANKED_STRATEGY_ID, SelectionStrategy
from .premapped import PremappedSelection
from .ranked import RankedSelection

STRATEGY_IDS = (RANKED_STRATEGY_ID, PREMAPPED_STRATEGY_ID)


def get_strategy(strategy_id: str) -> SelectionStrategy:
    if strategy_id == RANKED_STRATEGY_ID:
        return RankedSelection()
    if strategy_id == PREMAPPED_STRATEGY_ID:
        return PremappedSelection()
    raise ValueError(f"Unsupported strategy_id={strategy_id!r} (supported: {', '.join(STRATEGY_IDS)})")
