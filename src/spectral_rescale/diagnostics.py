"""
spectral_rescale.diagnostics

Comparison helpers for rescaled series:
- mean shift (DC difference)
- RMS difference
- percent difference
- spectral energy of a normalized spectrum
"""

from __future__ import annotations

import numpy as np
from .types import Array


def mean_shift(series: Array, ref: Array) -> float:
    """mean(series) - mean(ref)."""
    return float(np.mean(np.asarray(series, dtype=float)) - np.mean(np.asarray(ref, dtype=float)))


def rms_difference(series: Array, ref: Array) -> float:
    """sqrt(mean((series - ref)^2)); inputs must have the same shape."""
    a = np.asarray(series, dtype=float)
    b = np.asarray(ref, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"rms_difference: shape mismatch {a.shape} vs {b.shape}")
    return float(np.sqrt(np.mean((a - b) ** 2)))


def percent_difference(series: Array, ref: Array) -> np.ndarray:
    """100 * (series - ref) / ref (elementwise)."""
    a = np.asarray(series, dtype=float)
    b = np.asarray(ref, dtype=float)
    if np.any(b == 0.0):
        raise ValueError("ref must be nonzero everywhere for percent_difference.")
    return 100.0 * (a - b) / b


def spectral_energy(spectrum: Array) -> float:
    """
    Sum of |X_k|^2 over the normalized one-sided spectrum.

    Notes
    -----
    This is not the full two-sided Parseval sum (non-DC bins are not doubled);
    it is meant for comparing spectra of equal length.
    """
    X = np.asarray(spectrum, dtype=complex)
    return float(np.sum(np.abs(X) ** 2))
