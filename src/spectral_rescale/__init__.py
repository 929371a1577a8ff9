"""
spectral_rescale

Transfer frequency-domain structure learned from a template pair of series
(collapsed = low resolution, expanded = high resolution) onto a new collapsed
target, producing a synthetic expanded target.

The whole pipeline is pure: no module-level caches, no shared state.
"""

from __future__ import annotations

from .errors import (  # noqa: F401
    EmptyFrequencyDomain,
    InvalidSpectrumLength,
    OrderOutOfRange,
    RescaleError,
    ShapeMismatch,
)
from .config import RescaleConfig  # noqa: F401
from .rescaler import RescaleResult, rescale, rescale_ranked, rescale_report, rescale_with_config  # noqa: F401
from .selection import PREMAPPED_STRATEGY_ID, RANKED_STRATEGY_ID, STRATEGY_IDS  # noqa: F401

__version__ = "0.1.0"
