"""Measures on the real line and the relations between them.

Purpose
- Reference (Lebesgue) measure with adaptive quadrature for integrals.
- Point mass (Dirac) measure.
- Measure with density: S ↦ ∫_S f d(base).
- Absolute continuity predicate and Radon–Nikodym derivative.

Notes
- Integrals over unbounded intervals are split at caller-supplied breakpoints so that
  quadrature sees the features of narrow integrands (e.g. a sharp Gaussian peak).
- Measure values live in [0, +inf]; integrals are coerced with to_ennreal.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Callable, Iterable, Optional, Sequence, Tuple
import warnings

from scipy import integrate

from .config import DEFAULT_CONFIG, QuadratureConfig
from .density import to_ennreal
from .params import InvalidParameter, ensure_finite
from .sets import Interval, MeasurableSet, REAL_LINE, above, below, point, points
from .utils.logging import get_logger

logger = get_logger()

RealFn = Callable[[float], float]


class NotAbsolutelyContinuous(InvalidParameter):
    """Raised when a Radon–Nikodym derivative is requested but does not exist."""


class Measure:
    """Base class for measures on the Borel sets of ℝ."""

    def measure_of(self, s: MeasurableSet) -> float:
        raise NotImplementedError

    def integrate(
        self,
        f: RealFn,
        s: MeasurableSet = REAL_LINE,
        breakpoints: Sequence[float] = (),
        config: Optional[QuadratureConfig] = None,
    ) -> float:
        raise NotImplementedError

    def is_null(self, s: MeasurableSet) -> bool:
        return self.measure_of(s) == 0.0

    def total_mass(self) -> float:
        return self.measure_of(REAL_LINE)

    def is_probability(self, tol: float = 1e-9) -> bool:
        return abs(self.total_mass() - 1.0) <= tol


def _segments(iv: Interval, breakpoints: Iterable[float]) -> list[Tuple[float, float]]:
    cuts = sorted({float(b) for b in breakpoints if iv.lo < float(b) < iv.hi})
    edges = [iv.lo] + cuts + [iv.hi]
    return [(a, b) for a, b in zip(edges[:-1], edges[1:]) if a < b]


@dataclass(frozen=True)
class LebesgueMeasure(Measure):
    """Length measure on ℝ."""

    def measure_of(self, s: MeasurableSet) -> float:
        return s.lebesgue()

    def integrate(
        self,
        f: RealFn,
        s: MeasurableSet = REAL_LINE,
        breakpoints: Sequence[float] = (),
        config: Optional[QuadratureConfig] = None,
    ) -> float:
        """
        ∫_S f dx by adaptive quadrature, one call per segment of each interval
        of S after splitting at the breakpoints. Zero-length pieces contribute 0.
        """
        cfg = config or DEFAULT_CONFIG
        total = 0.0
        for iv in s.intervals():
            for a, b in _segments(iv, breakpoints):
                with warnings.catch_warnings(record=True) as caught:
                    warnings.simplefilter("always", integrate.IntegrationWarning)
                    val, err = integrate.quad(
                        lambda t: float(f(t)),
                        a,
                        b,
                        epsabs=cfg.epsabs,
                        epsrel=cfg.epsrel,
                        limit=cfg.limit,
                    )
                for w in caught:
                    if issubclass(w.category, integrate.IntegrationWarning):
                        logger.warning(f"quadrature on ({a:g}, {b:g}) did not converge: {w.message}")
                logger.debug(f"quad ({a:g}, {b:g}) value={val:.10g} abserr={err:.3g}")
                total += val
        return float(total)


@dataclass(frozen=True)
class DiracMeasure(Measure):
    """Point mass at `at`."""
    at: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "at", ensure_finite(self.at, "at"))

    def measure_of(self, s: MeasurableSet) -> float:
        return 1.0 if s.contains(self.at) else 0.0

    def integrate(
        self,
        f: RealFn,
        s: MeasurableSet = REAL_LINE,
        breakpoints: Sequence[float] = (),
        config: Optional[QuadratureConfig] = None,
    ) -> float:
        return float(f(self.at)) if s.contains(self.at) else 0.0


@dataclass(frozen=True)
class WithDensity(Measure):
    """
    base.withDensity(f): S ↦ ∫_S f d(base).

    Fields
    - base: reference measure
    - density: non-negative function
    - positive: density is known to be strictly positive and finite everywhere
    - breakpoints: quadrature hints forwarded to base.integrate
    """
    base: Measure
    density: RealFn
    positive: bool = False
    breakpoints: Tuple[float, ...] = field(default=())
    config: Optional[QuadratureConfig] = field(default=None, compare=False, repr=False)

    def measure_of(self, s: MeasurableSet) -> float:
        val = self.base.integrate(self.density, s, self.breakpoints, self.config)
        return float(to_ennreal(val))

    def integrate(
        self,
        f: RealFn,
        s: MeasurableSet = REAL_LINE,
        breakpoints: Sequence[float] = (),
        config: Optional[QuadratureConfig] = None,
    ) -> float:
        pts = tuple(breakpoints) + self.breakpoints
        return self.base.integrate(lambda t: f(t) * self.density(t), s, pts, config or self.config)


def default_probes(*measures: Measure) -> list[MeasurableSet]:
    """
    Probe family for absolute-continuity checks: atoms of the measures involved,
    a few singletons and short intervals around them, and the two half-lines.
    """
    centers = [0.0]
    for m in measures:
        if isinstance(m, DiracMeasure):
            centers.append(m.at)
    probes: list[MeasurableSet] = []
    for c in centers:
        probes.append(point(c))
        probes.append(points(c - 1.0, c + 1.0))
        probes.append(Interval(c - 0.5, c + 0.5))
        probes.append(Interval(c + 1e-3, c + 2e-3))
        probes.append(below(c))
        probes.append(above(c))
    return probes


def absolutely_continuous(
    m1: Measure,
    m2: Measure,
    probes: Optional[Sequence[MeasurableSet]] = None,
) -> bool:
    """
    m1 ≪ m2: every m2-null set is m1-null.

    Decided structurally for the cases this package builds (with-density over its
    base, strictly positive densities, Dirac vs Lebesgue). Anything else is checked
    on a probe family of sets, which can refute but only suggest the relation.
    """
    if m1 == m2:
        return True
    if isinstance(m1, WithDensity) and m1.base == m2:
        return True
    if isinstance(m2, WithDensity) and m2.base == m1 and m2.positive:
        return True
    if isinstance(m1, DiracMeasure) and isinstance(m2, LebesgueMeasure):
        return False
    if isinstance(m1, DiracMeasure) and isinstance(m2, DiracMeasure):
        return m1.at == m2.at
    family = probes if probes is not None else default_probes(m1, m2)
    for s in family:
        if m2.is_null(s) and not m1.is_null(s):
            logger.debug(f"absolute continuity refuted on {s}")
            return False
    return True


def rn_deriv(m: Measure, base: Measure) -> RealFn:
    """
    Radon–Nikodym derivative dm/d(base).

    Defined for m == base (constant 1) and for m = base.withDensity(f), where the
    derivative is f up to a base-null set.
    """
    if m == base:
        return lambda t: 1.0
    if isinstance(m, WithDensity) and m.base == base:
        return m.density
    raise NotAbsolutelyContinuous(
        f"{type(m).__name__} has no Radon–Nikodym derivative with respect to {type(base).__name__}"
    )


def is_density_of(
    g: RealFn,
    m: Measure,
    base: Measure,
    probes: Optional[Sequence[MeasurableSet]] = None,
    tol: float = 1e-7,
    breakpoints: Sequence[float] = (),
) -> bool:
    """
    Check that g realizes m over base on the probe family: ∫_S g d(base) == m(S).

    Functions that differ only on a base-null set pass together, as a density is
    only determined almost everywhere.
    """
    family = probes if probes is not None else default_probes(m, base)
    for s in family:
        lhs = float(to_ennreal(base.integrate(g, s, breakpoints)))
        rhs = m.measure_of(s)
        if math.isinf(lhs) or math.isinf(rhs):
            if lhs != rhs:
                return False
            continue
        if abs(lhs - rhs) > tol:
            logger.debug(f"density mismatch on {s}: {lhs:.10g} vs {rhs:.10g}")
            return False
    return True


__all__ = [
    "Measure",
    "LebesgueMeasure",
    "DiracMeasure",
    "WithDensity",
    "NotAbsolutelyContinuous",
    "absolutely_continuous",
    "rn_deriv",
    "is_density_of",
    "default_probes",
]
