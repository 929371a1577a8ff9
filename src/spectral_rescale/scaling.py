"""
spectral_rescale.scaling

Scaling = what changed at each low-res frequency between the collapsed
reference and the collapsed target:

  scaling[i] = forward(target)[i] - forward(reference)[i]

Two entry points:
- compute_scaling: same-resolution path, scaling indexed by low-res bin
- compute_scaling_cross: same scaling plus the low-res -> high-res
  FrequencyIndexMap, for strategies that address high-res bins directly
"""

from __future__ import annotations

import numpy as np

from .errors import ShapeMismatch
from .matching import grid_index_map
from .transform import as_series, forward, rfft_frequencies
from .types import Array, CrossScaling


def check_collapsed_pair(reference_low_res: Array, target_low_res: Array) -> tuple[np.ndarray, np.ndarray]:
    ref = as_series(reference_low_res, name="reference_collapsed")
    tgt = as_series(target_low_res, name="target_collapsed")
    if ref.shape != tgt.shape:
        raise ShapeMismatch(
            f"reference_collapsed and target_collapsed must have equal length "
            f"(got {ref.size} and {tgt.size})"
        )
    return ref, tgt


def compute_scaling(reference_low_res: Array, target_low_res: Array) -> np.ndarray:
    """Complex scaling per low-res bin, shape (len // 2 + 1,)."""
    ref, tgt = check_collapsed_pair(reference_low_res, target_low_res)
    return forward(tgt) - forward(ref)


def compute_scaling_cross(
    reference_high_res_freqs: Array,
    reference_low_res: Array,
    target_low_res: Array,
) -> CrossScaling:
    """
    Scaling over low-res bins plus the nearest high-res bin of every low-res bin.

    The index map covers the whole low-res grid, independent of which
    components are later selected.
    """
    scaling = compute_scaling(reference_low_res, target_low_res)
    f_low = rfft_frequencies(np.asarray(reference_low_res).size)
    index_map = grid_index_map(f_low, reference_high_res_freqs)
    return CrossScaling(scaling=scaling, index_map=index_map)
