"""
spectral_rescale.rescaler

Single entry point pipeline:

  1. validate shapes
  2. base = forward(reference_expanded)
  3. scaling between reference_collapsed and target_collapsed, selected by a
     named strategy and bounded by `order`
  4. add the selected components to base at their high-res bins
  5. inverse(base) -> series with len(reference_expanded) samples

Two public argument orders coexist:

  rescale(reference_expanded, reference_collapsed, target_collapsed, order=None)
      premapped_v0 form (strategy selectable by keyword)
  rescale_ranked(target_collapsed, reference_expanded, reference_collapsed, order=None)
      ranked_v0 form
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, Optional, Union

import numpy as np

from .config import RescaleConfig
from .errors import ShapeMismatch
from .scaling import check_collapsed_pair
from .selection.interface import PREMAPPED_STRATEGY_ID, RANKED_STRATEGY_ID, SelectionStrategy
from .selection.registry import get_strategy
from .transform import as_series, forward, inverse
from .types import Array

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RescaleResult:
    """
    series:       rescaled series, same length as reference_expanded
    strategy_id:  selection strategy used
    n_components: number of scaling components selected
    applied:      high-res bin -> value added to the reference spectrum
    """
    series: np.ndarray
    strategy_id: str
    n_components: int
    applied: Dict[int, complex] = field(default_factory=dict)


def _resolve_strategy(strategy: Union[str, SelectionStrategy]) -> SelectionStrategy:
    if isinstance(strategy, str):
        return get_strategy(strategy)
    return strategy


def validate_inputs(
    reference_expanded: Array,
    reference_collapsed: Array,
    target_collapsed: Array,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Coerce the three series and enforce the length contract."""
    ref_c, tgt_c = check_collapsed_pair(reference_collapsed, target_collapsed)
    ref_e = as_series(reference_expanded, name="reference_expanded")
    if ref_e.size < ref_c.size:
        raise ShapeMismatch(
            f"reference_expanded must be at least as long as reference_collapsed "
            f"(got {ref_e.size} < {ref_c.size})"
        )
    return ref_e, ref_c, tgt_c


def rescale_report(
    reference_expanded: Array,
    reference_collapsed: Array,
    target_collapsed: Array,
    order: Optional[int] = None,
    *,
    strategy: Union[str, SelectionStrategy] = PREMAPPED_STRATEGY_ID,
) -> RescaleResult:
    """Run the rescale pipeline and return the series with its bookkeeping."""
    ref_e, ref_c, tgt_c = validate_inputs(reference_expanded, reference_collapsed, target_collapsed)
    strat = _resolve_strategy(strategy)

    base = forward(ref_e)
    res = strat.transfer(
        base,
        reference_collapsed=ref_c,
        target_collapsed=tgt_c,
        n_expanded=ref_e.size,
        order=order,
    )
    series = inverse(res.spectrum, ref_e.size)

    logger.debug(
        "rescale[%s]: expanded=%d collapsed=%d components=%d",
        strat.strategy_id, ref_e.size, ref_c.size, res.n_components,
    )
    return RescaleResult(
        series=series,
        strategy_id=strat.strategy_id,
        n_components=res.n_components,
        applied=res.applied,
    )


def rescale(
    reference_expanded: Array,
    reference_collapsed: Array,
    target_collapsed: Array,
    order: Optional[int] = None,
    *,
    strategy: Union[str, SelectionStrategy] = PREMAPPED_STRATEGY_ID,
) -> np.ndarray:
    """
    Expand target_collapsed to the resolution of reference_expanded.

    Parameters
    ----------
    reference_expanded : array-like
        Template series, high resolution.
    reference_collapsed : array-like
        Template series, low resolution.
    target_collapsed : array-like
        Target series, low resolution; same length as reference_collapsed.
    order : int, optional
        Number of Fourier components transferred. None = all available
        (len(reference_collapsed) // 2 + 1).
    strategy : str or SelectionStrategy
        Component selection policy; "premapped_v0" by default.

    Returns
    -------
    np.ndarray
        Rescaled target, same length as reference_expanded.
    """
    return rescale_report(
        reference_expanded, reference_collapsed, target_collapsed, order, strategy=strategy
    ).series


def rescale_ranked(
    target_collapsed: Array,
    reference_expanded: Array,
    reference_collapsed: Array,
    order: Optional[int] = None,
) -> np.ndarray:
    """
    Ranked (order-truncated) form, target first.

    Same contract as rescale() with strategy="ranked_v0"; only the argument
    order differs.
    """
    return rescale_report(
        reference_expanded, reference_collapsed, target_collapsed, order, strategy=RANKED_STRATEGY_ID
    ).series


def rescale_with_config(
    reference_expanded: Array,
    reference_collapsed: Array,
    target_collapsed: Array,
    config: RescaleConfig,
) -> RescaleResult:
    config.validate()
    return rescale_report(
        reference_expanded, reference_collapsed, target_collapsed, config.order, strategy=config.strategy
    )
