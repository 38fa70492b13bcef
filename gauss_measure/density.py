"""Gaussian density on the real line.

density(μ, v, x) = (1 / sqrt(2π v)) · exp(−(x − μ)² / (2 v))   for v > 0
density(μ, 0, x) = 0                                            (point-mass convention)

Invariants
- density ≥ 0 everywhere; density > 0 for v > 0 wherever the value is representable.
- Computed in log space and exponentiated once: extreme deviations saturate to 0.0,
  never NaN or an overflow error.
- Scalars in, float out; array-likes in, float ndarray out.
"""
from __future__ import annotations

import math
from typing import Union

import numpy as np

from .params import InvalidParameter, check_mean, check_variance, ensure_finite

ArrayLike = Union[float, np.ndarray]

_LOG_2PI = math.log(2.0 * math.pi)


def _as_points(x: ArrayLike) -> np.ndarray:
    arr = np.asarray(x, dtype=float)
    if np.any(np.isnan(arr)):
        raise InvalidParameter("x must not contain NaN")
    return arr


def _out(arr: np.ndarray) -> ArrayLike:
    return float(arr) if arr.ndim == 0 else arr


def log_density(mean: float, variance: float, x: ArrayLike) -> ArrayLike:
    """
    log density(μ, v, x) = −½ log(2π v) − (x − μ)² / (2 v); −inf when v = 0.
    """
    m = check_mean(mean)
    v = check_variance(variance)
    pts = _as_points(x)
    if v == 0.0:
        return _out(np.full(pts.shape, -np.inf, dtype=float))
    with np.errstate(over="ignore", invalid="ignore"):
        z = (pts - m) / math.sqrt(v)
        out = -0.5 * (_LOG_2PI + math.log(v)) - 0.5 * z * z
    return _out(np.asarray(out, dtype=float))


def density(mean: float, variance: float, x: ArrayLike) -> ArrayLike:
    """Real-valued Gaussian density; identically zero for variance 0."""
    lp = np.asarray(log_density(mean, variance, x), dtype=float)
    with np.errstate(under="ignore"):
        out = np.exp(lp)
    return _out(out)


def to_ennreal(value: ArrayLike) -> ArrayLike:
    """
    Coerce real values into [0, +inf]: negatives map to 0, +inf is kept.

    NaN has no image in the extended non-negative reals and is rejected.
    """
    arr = np.asarray(value, dtype=float)
    if np.any(np.isnan(arr)):
        raise InvalidParameter("NaN has no extended non-negative value")
    return _out(np.maximum(arr, 0.0))


def density_ext(mean: float, variance: float, x: ArrayLike) -> ArrayLike:
    """
    density(μ, v, x) as an extended non-negative value, for integration against
    measures. Finite x always gives a finite value equal to density(μ, v, x).
    """
    return to_ennreal(density(mean, variance, x))


# Shift and scale identities. Each function evaluates the right-hand side, which
# equals density(μ, v, ·) at the transformed point on the left-hand side.


def density_sub(mean: float, variance: float, x: ArrayLike, y: float) -> ArrayLike:
    """density(μ, v, x − y) = density(μ + y, v, x)."""
    return density(check_mean(mean) + ensure_finite(y, "y"), variance, x)


def density_add(mean: float, variance: float, x: ArrayLike, y: float) -> ArrayLike:
    """density(μ, v, x + y) = density(μ − y, v, x)."""
    return density(check_mean(mean) - ensure_finite(y, "y"), variance, x)


def _check_scale(c: float) -> float:
    c = ensure_finite(c, "c")
    if c == 0.0:
        raise InvalidParameter("scale factor c must be non-zero")
    return c


def density_inv_mul(mean: float, variance: float, c: float, x: ArrayLike) -> ArrayLike:
    """
    density(μ, v, x / c) = |c| · density(c μ, c² v, x) for c ≠ 0.

    The scaled parameters are kept factored (log c² v = log v + 2 log|c|, and
    (x − c μ)² / (c² v) = (x / c − μ)² / v), so c μ or c² v leaving the float
    range does not change the result.
    """
    c = _check_scale(c)
    m = check_mean(mean)
    v = check_variance(variance)
    pts = _as_points(x)
    if v == 0.0:
        return _out(np.zeros(pts.shape, dtype=float))
    log_c = math.log(abs(c))
    with np.errstate(over="ignore", invalid="ignore"):
        z = (pts / c - m) / math.sqrt(v)
        lp = log_c - 0.5 * (_LOG_2PI + math.log(v) + 2.0 * log_c) - 0.5 * z * z
    with np.errstate(under="ignore"):
        return _out(np.exp(np.asarray(lp, dtype=float)))


def density_mul(mean: float, variance: float, c: float, x: ArrayLike) -> ArrayLike:
    """
    density(μ, v, c x) = |c|⁻¹ · density(μ / c, v / c², x) for c ≠ 0.

    Evaluated with v / c² kept in log space, so an underflowing v / c² still
    gives the positive value of the left-hand side.
    """
    c = _check_scale(c)
    m = check_mean(mean)
    v = check_variance(variance)
    pts = _as_points(x)
    if v == 0.0:
        return _out(np.zeros(pts.shape, dtype=float))
    log_c = math.log(abs(c))
    with np.errstate(over="ignore", invalid="ignore"):
        z = (c * pts - m) / math.sqrt(v)
        lp = -log_c - 0.5 * (_LOG_2PI + math.log(v) - 2.0 * log_c) - 0.5 * z * z
    with np.errstate(under="ignore"):
        return _out(np.exp(np.asarray(lp, dtype=float)))


__all__ = [
    "log_density",
    "density",
    "density_ext",
    "to_ennreal",
    "density_sub",
    "density_add",
    "density_inv_mul",
    "density_mul",
]
