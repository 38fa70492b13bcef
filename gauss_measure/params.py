"""Parameter validation for the Gaussian model.

Invariants
- Mean is a finite real number.
- Variance is a finite, non-negative real number (v = 0 is the degenerate case).
- Invalid input is rejected immediately with InvalidParameter; nothing is clamped.
"""
from __future__ import annotations

import math


class InvalidParameter(ValueError):
    """Raised when a mean, variance, point or probability is outside its domain."""


def ensure_real(x: object, name: str) -> float:
    """
    Convert x to float, raising TypeError for non-numeric input and
    InvalidParameter for NaN.
    """
    if isinstance(x, (str, bytes)):
        raise TypeError(f"{name} must be a real number, got {type(x).__name__}")
    try:
        val = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be a real number convertible to float") from e
    if math.isnan(val):
        raise InvalidParameter(f"{name} must not be NaN")
    return val


def ensure_finite(x: object, name: str) -> float:
    val = ensure_real(x, name)
    if not math.isfinite(val):
        raise InvalidParameter(f"{name} must be finite, got {val}")
    return val


def check_mean(mean: object) -> float:
    return ensure_finite(mean, "mean")


def check_variance(variance: object) -> float:
    """Validate a variance: finite and >= 0."""
    v = ensure_finite(variance, "variance")
    if v < 0.0:
        raise InvalidParameter(f"variance must be non-negative, got {v}")
    return v


def check_probability(p: object) -> float:
    val = ensure_real(p, "p")
    if not (0.0 <= val <= 1.0):
        raise InvalidParameter(f"p must lie in [0, 1], got {val}")
    return val


__all__ = [
    "InvalidParameter",
    "ensure_real",
    "ensure_finite",
    "check_mean",
    "check_variance",
    "check_probability",
]
