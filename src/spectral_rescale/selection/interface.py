# FILE: src/spectral_rescale/selection/interface.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

import numpy as np

from ..errors import OrderOutOfRange

# Frozen strategy identifiers (part of the public contract; used in CSV + config)
RANKED_STRATEGY_ID: str = "ranked_v0"
PREMAPPED_STRATEGY_ID: str = "premapped_v0"


@dataclass(frozen=True)
class TransferResult:
    """
    Outcome of applying selected components to the high-res base spectrum.

    spectrum:     modified normalized spectrum (same bins as the base)
    applied:      high-res bin -> net value added to the base at that bin
    n_components: number of components selected (before any collision)
    """
    spectrum: np.ndarray
    applied: Dict[int, complex] = field(default_factory=dict)
    n_components: int = 0


class SelectionStrategy(Protocol):
    """
    Component selection policy. Callers pick one explicitly; nothing is inferred.

    Implementations compute the scaling between the two collapsed series,
    keep at most `order` components (None = all) and add them to a copy of
    base_spectrum. base_spectrum itself is never mutated.
    """
    strategy_id: str  # REQUIRED: stable identifier for CSV + config
    def transfer(
        self,
        base_spectrum: np.ndarray,
        *,
        reference_collapsed: np.ndarray,
        target_collapsed: np.ndarray,
        n_expanded: int,
        order: Optional[int],
    ) -> TransferResult: ...


def resolve_order(order: Optional[int], available: int) -> int:
    """
    None -> available. Otherwise order must be an integer in [0, available];
    anything else raises OrderOutOfRange (never clamped).
    """
    if order is None:
        return int(available)
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise OrderOutOfRange(order, available)
    if order < 0 or order > available:
        raise OrderOutOfRange(order, available)
    return int(order)


def magnitude_ranking(scaling: np.ndarray) -> np.ndarray:
    """Bin indices sorted by descending |scaling|; ties keep ascending bin order."""
    mags = np.abs(np.asarray(scaling, dtype=complex))
    return np.argsort(-mags, kind="stable")
