"""
spectral_rescale.errors

Error kinds raised by the rescaling pipeline. All of them are ValueError
subclasses: every failure here is a property of the caller's inputs, and a
failing call fails identically on retry.
"""

from __future__ import annotations


class RescaleError(ValueError):
    """Base class for rescaling input errors."""


class ShapeMismatch(RescaleError):
    """Series lengths are incompatible (or a series is not one-dimensional)."""


class OrderOutOfRange(RescaleError):
    """Requested component count is negative or exceeds the available components."""

    def __init__(self, order: object, available: int):
        self.order = order
        self.available = int(available)
        super().__init__(f"order must be an integer in [0, {self.available}], got {order!r}")


class EmptyFrequencyDomain(RescaleError):
    """No frequency bins to work with (zero-length series or empty grid)."""


class InvalidSpectrumLength(RescaleError):
    """Spectrum is too short to invert, or does not match the requested output length."""
