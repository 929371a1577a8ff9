"""
spectral_rescale.transform

Normalized real FFT pair.

  forward(x)  = rfft(x) / N
  inverse(X)  = irfft(X, M) * M,   M = 2 * (len(X) - 1) by default

Dividing by N makes spectra additive at the time-domain scale: adding c to
bin 0 of forward(x) and inverting shifts every sample of x by c.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .errors import EmptyFrequencyDomain, InvalidSpectrumLength, ShapeMismatch
from .types import Array


def as_series(x: Array, *, name: str = "series") -> np.ndarray:
    """Coerce to a 1D float array; reject multichannel and non-finite input."""
    arr = np.asarray(x, dtype=float)
    if arr.ndim != 1:
        raise ShapeMismatch(f"{name} must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise EmptyFrequencyDomain(f"{name} is empty")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values")
    return arr


def n_bins(n: int) -> int:
    """Number of non-negative frequency bins for a length-n real series."""
    return int(n) // 2 + 1


def rfft_frequencies(n: int) -> np.ndarray:
    """Dimensionless frequencies i/n (cycles/sample), i = 0..floor(n/2)."""
    if int(n) < 1:
        raise EmptyFrequencyDomain(f"frequency grid needs n >= 1, got n={n}")
    return np.fft.rfftfreq(int(n))


def forward(series: Array) -> np.ndarray:
    """Normalized real FFT: rfft(series) / len(series)."""
    x = as_series(series)
    return np.fft.rfft(x) / x.size


def inverse(spectrum: Array, n: Optional[int] = None) -> np.ndarray:
    """
    Denormalized inverse real FFT.

    Parameters
    ----------
    spectrum : array-like, complex
        Normalized spectrum with K bins.
    n : int, optional
        Output length. Defaults to 2 * (K - 1). Any n with n // 2 + 1 == K is
        accepted, which lets odd-length series round-trip exactly.

    Returns
    -------
    np.ndarray
        Real series of length n.
    """
    X = np.asarray(spectrum, dtype=complex)
    if X.ndim != 1:
        raise InvalidSpectrumLength(f"spectrum must be one-dimensional, got shape {X.shape}")
    if X.size < 2:
        raise InvalidSpectrumLength(
            f"spectrum needs >= 2 bins to invert (got {X.size}); output length would be {2 * (X.size - 1)}"
        )
    if n is None:
        n = 2 * (X.size - 1)
    n = int(n)
    if n < 2 or n_bins(n) != X.size:
        raise InvalidSpectrumLength(f"output length n={n} is inconsistent with {X.size} bins")
    return np.fft.irfft(X, n) * n
