# src/spectral_rescale/types.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Tuple

import numpy as np

Array = np.ndarray

# Policy A: order-truncated, ranked by magnitude, matched to high-res bins at apply time.
# Policy B: top-N by magnitude, pre-mapped to high-res bins.
StrategyId = Literal["ranked_v0", "premapped_v0"]

# high-res bin -> complex scaling value (unordered; last write wins on collision)
PremappedScaling = Dict[int, complex]


@dataclass(frozen=True)
class Component:
    """One (frequency bin, complex scaling value) pair."""
    bin: int
    value: complex

    def magnitude(self) -> float:
        return float(abs(self.value))


@dataclass(frozen=True)
class RankedScaling:
    """
    Scaling components keyed by low-res bin, in descending magnitude order.

    The order is carried explicitly by the tuple, not by any mapping's
    iteration order. Ties keep the order of the stable sort (lower bin first).
    """
    components: Tuple[Component, ...]

    def __len__(self) -> int:
        return len(self.components)

    def bins(self) -> Tuple[int, ...]:
        return tuple(c.bin for c in self.components)

    def head(self, order: int) -> "RankedScaling":
        return RankedScaling(components=self.components[:order])


@dataclass(frozen=True)
class CrossScaling:
    """
    Raw scaling vector over low-res bins plus its low-res -> high-res bin map.

    scaling:   complex, shape (K_low,), target - reference
    index_map: int, shape (K_low,), nearest high-res bin for each low-res bin
    """
    scaling: np.ndarray
    index_map: np.ndarray

    def __len__(self) -> int:
        return int(self.scaling.shape[0])
