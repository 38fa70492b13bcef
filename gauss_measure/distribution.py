"""Gaussian probability distributions on the real line.

GaussianReal(μ, v) is a tagged variant:
- Degenerate(mean): v = 0, point mass at μ.
- Continuous(mean, variance): v > 0, density(μ, v, ·) with respect to Lebesgue measure.

Build values with distribution(μ, v), which picks the variant and checks that the
result has total mass 1. Callers dispatch on the variant instead of re-testing v == 0:

    match distribution(mu, v):
        case Degenerate(mean=m): ...
        case Continuous(mean=m, variance=v): ...
"""
from __future__ import annotations

import cmath
from dataclasses import dataclass, field
from functools import partial
import math
from typing import Optional, Union

import numpy as np
from scipy import special

from .config import DEFAULT_CONFIG, QuadratureConfig
from .density import ArrayLike, density, log_density, to_ennreal
from .measure import (
    DiracMeasure,
    LebesgueMeasure,
    Measure,
    NotAbsolutelyContinuous,
    WithDensity,
)
from .params import (
    InvalidParameter,
    check_mean,
    check_probability,
    check_variance,
    ensure_finite,
    ensure_real,
)
from .sets import Interval, IntervalUnion, MeasurableSet, REAL_LINE
from .utils.logging import get_logger

logger = get_logger()

# Quadrature breakpoints in units of standard deviations around the mean.
_BREAKPOINTS_SIGMA = (-40.0, -20.0, -10.0, -5.0, -2.0, -1.0, 0.0, 1.0, 2.0, 5.0, 10.0, 20.0, 40.0)


def _require_generator(rng: np.random.Generator) -> None:
    if not isinstance(rng, np.random.Generator):
        raise TypeError("rng must be a numpy.random.Generator instance")


def _require_size(n: int) -> int:
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise TypeError(f"n must be an integer; got type {type(n).__name__}.")
    if n < 0:
        raise InvalidParameter("n must be >= 0")
    return int(n)


def _safe_exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _mgf_exponent(mean: float, variance: float, t: float) -> float:
    # t · (μ + v t / 2): the inner sum of a finite and a possibly infinite term is
    # never NaN, so overflow lands on ±inf with the sign of the dominant term.
    return t * (mean + 0.5 * variance * t)


def _unit_phase(log_modulus: float, phase: float) -> complex:
    """exp(log_modulus + i·phase) for log_modulus ≤ 0."""
    if math.isfinite(phase):
        return cmath.exp(complex(log_modulus, phase))
    if math.exp(log_modulus) == 0.0:
        return 0j
    raise InvalidParameter(f"phase μ·t overflows; characteristic function is not representable (log|φ|={log_modulus:g})")


class GaussianDistribution:
    """Operations shared by both variants."""

    mean: float
    variance: float

    @property
    def std(self) -> float:
        return math.sqrt(self.variance)

    def probability_of(self, s: MeasurableSet) -> float:
        raise NotImplementedError

    def total_mass(self) -> float:
        return self.probability_of(REAL_LINE)

    def as_measure(self) -> Measure:
        raise NotImplementedError

    def is_absolutely_continuous_wrt_lebesgue(self) -> bool:
        raise NotImplementedError

    def lebesgue_is_absolutely_continuous_wrt(self) -> bool:
        raise NotImplementedError

    def pdf(self, x: ArrayLike) -> ArrayLike:
        """density(μ, v, x); identically zero for the point mass."""
        return density(self.mean, self.variance, x)

    def logpdf(self, x: ArrayLike) -> ArrayLike:
        return log_density(self.mean, self.variance, x)

    def sf(self, x: float) -> float:
        """P(X > x)."""
        raise NotImplementedError

    def cdf(self, x: float) -> float:
        """P(X ≤ x)."""
        raise NotImplementedError

    def add_const(self, c: float) -> "GaussianReal":
        """Law of X + c."""
        return distribution(self.mean + ensure_finite(c, "c"), self.variance, config=getattr(self, "config", None))

    def mul_const(self, c: float) -> "GaussianReal":
        """Law of c · X; collapses to a point mass at 0 when c = 0."""
        c = ensure_finite(c, "c")
        return distribution(c * self.mean, c * c * self.variance, config=getattr(self, "config", None))

    def neg(self) -> "GaussianReal":
        return self.mul_const(-1.0)


@dataclass(frozen=True)
class Degenerate(GaussianDistribution):
    """Point mass at `mean` (zero variance)."""
    mean: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "mean", check_mean(self.mean))

    @property
    def variance(self) -> float:
        return 0.0

    def probability_of(self, s: MeasurableSet) -> float:
        return 1.0 if s.contains(self.mean) else 0.0

    def as_measure(self) -> DiracMeasure:
        return DiracMeasure(self.mean)

    def is_absolutely_continuous_wrt_lebesgue(self) -> bool:
        return False

    def lebesgue_is_absolutely_continuous_wrt(self) -> bool:
        return False

    def rn_deriv(self, x: ArrayLike) -> ArrayLike:
        raise NotAbsolutelyContinuous("a point mass has no density with respect to Lebesgue measure")

    def cdf(self, x: float) -> float:
        return 1.0 if ensure_real(x, "x") >= self.mean else 0.0

    def sf(self, x: float) -> float:
        return 1.0 - self.cdf(x)

    def quantile(self, p: float) -> float:
        """Generalized inverse inf{x : cdf(x) ≥ p}."""
        p = check_probability(p)
        return -math.inf if p == 0.0 else self.mean

    def sample(self, n: int, rng: np.random.Generator) -> np.ndarray:
        n = _require_size(n)
        _require_generator(rng)
        return np.full(n, self.mean, dtype=np.float64)

    def mgf(self, t: float) -> float:
        return _safe_exp(self.mean * ensure_finite(t, "t"))

    def charfun(self, t: float) -> complex:
        return _unit_phase(0.0, self.mean * ensure_finite(t, "t"))

    def entropy(self) -> float:
        return -math.inf


@dataclass(frozen=True)
class Continuous(GaussianDistribution):
    """
    Normal law N(mean, variance) with variance > 0.

    Probabilities of intervals are evaluated in closed form through the normal
    CDF; integral_of_density goes through quadrature against Lebesgue measure.
    """
    mean: float
    variance: float
    config: Optional[QuadratureConfig] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mean", check_mean(self.mean))
        v = check_variance(self.variance)
        if v == 0.0:
            raise InvalidParameter("Continuous requires variance > 0; use Degenerate for a point mass")
        object.__setattr__(self, "variance", v)

    def _z(self, x: float) -> float:
        return (x - self.mean) / self.std

    def cdf(self, x: float) -> float:
        return float(special.ndtr(self._z(ensure_real(x, "x"))))

    def sf(self, x: float) -> float:
        return float(special.ndtr(-self._z(ensure_real(x, "x"))))

    def logcdf(self, x: float) -> float:
        return float(special.log_ndtr(self._z(ensure_real(x, "x"))))

    def quantile(self, p: float) -> float:
        p = check_probability(p)
        return float(self.mean + self.std * special.ndtri(p))

    def _interval_mass(self, iv: Interval) -> float:
        # Take the difference on the tail closer to the interval for accuracy.
        if iv.lo >= self.mean:
            mass = self.sf(iv.lo) - self.sf(iv.hi)
        else:
            mass = self.cdf(iv.hi) - self.cdf(iv.lo)
        return max(0.0, mass)

    def probability_of(self, s: MeasurableSet) -> float:
        total = sum(self._interval_mass(iv) for iv in s.intervals())
        return min(1.0, float(total))

    def breakpoints(self) -> tuple[float, ...]:
        return tuple(self.mean + k * self.std for k in _BREAKPOINTS_SIGMA)

    def as_measure(self) -> WithDensity:
        return WithDensity(
            base=LebesgueMeasure(),
            density=partial(density, self.mean, self.variance),
            positive=True,
            breakpoints=self.breakpoints(),
            config=self.config,
        )

    def _standardize(self, iv: Interval) -> Interval:
        return Interval(self._z(iv.lo), self._z(iv.hi), iv.lo_closed, iv.hi_closed)

    def integral_of_density(self, s: MeasurableSet = REAL_LINE) -> float:
        """
        ofReal(∫_S density(μ, v, x) dx) by quadrature.

        Integrated in z = (x − μ)/σ, where σ · density(μ, v, μ + σz) = density(0, 1, z).
        The breakpoints then stay distinct even when σ is below the float spacing at μ.
        """
        z_set = IntervalUnion(tuple(self._standardize(iv) for iv in s.intervals()))
        val = LebesgueMeasure().integrate(partial(density, 0.0, 1.0), z_set, _BREAKPOINTS_SIGMA, self.config)
        return float(to_ennreal(val))

    def is_absolutely_continuous_wrt_lebesgue(self) -> bool:
        return True

    def lebesgue_is_absolutely_continuous_wrt(self) -> bool:
        return True

    def rn_deriv(self, x: ArrayLike) -> ArrayLike:
        return self.pdf(x)

    def sample(self, n: int, rng: np.random.Generator) -> np.ndarray:
        n = _require_size(n)
        _require_generator(rng)
        return rng.normal(loc=self.mean, scale=self.std, size=n).astype(np.float64, copy=False)

    def mgf(self, t: float) -> float:
        return _safe_exp(_mgf_exponent(self.mean, self.variance, ensure_finite(t, "t")))

    def charfun(self, t: float) -> complex:
        t = ensure_finite(t, "t")
        return _unit_phase(-0.5 * self.variance * t * t, self.mean * t)

    def entropy(self) -> float:
        return 0.5 * math.log(2.0 * math.pi * math.e * self.variance)


GaussianReal = Union[Degenerate, Continuous]


def _check_total_mass(dist: GaussianReal, cfg: QuadratureConfig, by_quadrature: bool) -> None:
    if by_quadrature and isinstance(dist, Continuous):
        mass = dist.integral_of_density(REAL_LINE)
    else:
        mass = dist.probability_of(REAL_LINE)
    if abs(mass - 1.0) > cfg.mass_tol:
        raise InvalidParameter(f"{dist} has total mass {mass:.12g}, expected 1")


def distribution(
    mean: float,
    variance: float,
    config: Optional[QuadratureConfig] = None,
    check_by_quadrature: bool = False,
) -> GaussianReal:
    """
    GaussianReal(μ, v): point mass at μ when v = 0, otherwise the measure with
    density density(μ, v, ·) over Lebesgue measure.

    The total mass is checked on every construction; with check_by_quadrature the
    normalization integral is evaluated numerically instead of in closed form.
    """
    m = check_mean(mean)
    v = check_variance(variance)
    cfg = config or DEFAULT_CONFIG
    dist: GaussianReal
    if v == 0.0:
        dist = Degenerate(m)
    else:
        dist = Continuous(m, v, config=config)
    _check_total_mass(dist, cfg, check_by_quadrature)
    logger.debug(f"built {type(dist).__name__} mean={m:.10g} variance={v:.10g}")
    return dist


gaussian_real = distribution

__all__ = [
    "GaussianDistribution",
    "Degenerate",
    "Continuous",
    "GaussianReal",
    "distribution",
    "gaussian_real",
]
