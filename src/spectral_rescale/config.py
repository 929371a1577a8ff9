# src/spectral_rescale/config.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .selection.registry import STRATEGY_IDS
from .types import StrategyId


@dataclass(frozen=True)
class RescaleConfig:
    """
    Rescale knobs.

    order:    number of components transferred (None = all available)
    strategy: selection strategy id ("ranked_v0" or "premapped_v0")

    The upper bound on order depends on the collapsed series length, so it is
    checked at call time, not here.
    """
    order: Optional[int] = None
    strategy: StrategyId = "premapped_v0"

    def validate(self) -> None:
        """Raise ValueError if the knobs are invalid independent of any input."""
        if self.strategy not in STRATEGY_IDS:
            raise ValueError(f"Unsupported strategy={self.strategy!r} (supported: {', '.join(STRATEGY_IDS)})")
        if self.order is not None:
            if isinstance(self.order, bool) or not isinstance(self.order, (int, np.integer)):
                raise ValueError(f"order must be an int or None, got {self.order!r}")
            if self.order < 0:
                raise ValueError("order must be >= 0.")
