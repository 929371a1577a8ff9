"""
Component selection: which scaling components are transferred to the
high-res reference spectrum.

Two named strategies coexist and are chosen explicitly by the caller:
- ranked_v0    (RankedSelection): ordered low-res components, matched to
               high-res bins at apply time; colliding components accumulate
- premapped_v0 (PremappedSelection): components pre-mapped to high-res bins;
               colliding components overwrite
"""

from .interface import (  # noqa: F401
    PREMAPPED_STRATEGY_ID,
    RANKED_STRATEGY_ID,
    SelectionStrategy,
    TransferResult,
    resolve_order,
)
from .premapped import PremappedSelection, select_premapped  # noqa: F401
from .ranked import RankedSelection, rank_components, select_ranked  # noqa: F401
from .registry import STRATEGY_IDS, get_strategy  # noqa: F401
