# src/spectral_rescale/matching.py

from __future__ import annotations

import numpy as np

from .errors import EmptyFrequencyDomain, ShapeMismatch
from .transform import rfft_frequencies
from .types import Array


def _candidate_grid(candidate_frequencies: Array) -> np.ndarray:
    f = np.asarray(candidate_frequencies, dtype=float)
    if f.ndim != 1:
        raise ShapeMismatch(f"candidate_frequencies must be one-dimensional, got shape {f.shape}")
    if f.size == 0:
        raise EmptyFrequencyDomain("candidate_frequencies is empty")
    return f


def nearest_index(value: float, candidate_frequencies: Array) -> int:
    """
    Index of the candidate closest to value (absolute difference).

    Exact ties go to the lowest index: np.argmin returns the first minimum
    in ascending scan order.
    """
    f = _candidate_grid(candidate_frequencies)
    return int(np.argmin(np.abs(f - float(value))))


def grid_index_map(values: Array, grid: Array) -> np.ndarray:
    """
    Nearest grid index for every value, in one O((K_v + K_g) log K_g) pass.

    grid must be strictly increasing (rfft grids are). Each value is compared
    with its left and right neighbours in the grid; exact ties take the left
    one, which is the same lowest-index rule as nearest_index.
    """
    g = _candidate_grid(grid)
    if np.any(np.diff(g) <= 0.0):
        raise ValueError("grid must be strictly increasing")
    v = np.asarray(values, dtype=float)

    idx = np.searchsorted(g, v, side="left")
    right = np.minimum(idx, g.size - 1)
    left = np.maximum(idx - 1, 0)
    d_left = np.abs(g[left] - v)
    d_right = np.abs(g[right] - v)
    return np.where(d_left <= d_right, left, right).astype(int)


def frequency_index_map(n_from: int, n_to: int) -> np.ndarray:
    """
    FrequencyIndexMap between the rfft grids of two series lengths.

    Returns an int array with one entry per bin of the length-n_from grid,
    holding the nearest bin of the length-n_to grid. Total, not necessarily
    injective.
    """
    return grid_index_map(rfft_frequencies(n_from), rfft_frequencies(n_to))
