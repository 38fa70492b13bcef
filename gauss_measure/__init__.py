"""Gaussian distribution on the real line.

Modules
- density: real and extended-non-negative Gaussian density, shift/scale identities
- sets: measurable subsets of ℝ (finite unions of intervals)
- measure: Lebesgue, Dirac and with-density measures; absolute continuity; Radon–Nikodym
- distribution: GaussianReal(μ, v) as Degenerate | Continuous
- config: quadrature tolerances
"""

from .params import InvalidParameter
from .config import QuadratureConfig, DEFAULT_CONFIG
from .density import (
    density,
    density_ext,
    log_density,
    to_ennreal,
    density_sub,
    density_add,
    density_inv_mul,
    density_mul,
)
from .sets import (
    MeasurableSet,
    Interval,
    IntervalUnion,
    point,
    points,
    closed,
    open_,
    below,
    above,
    REAL_LINE,
    EMPTY,
)
from .measure import (
    Measure,
    LebesgueMeasure,
    DiracMeasure,
    WithDensity,
    NotAbsolutelyContinuous,
    absolutely_continuous,
    rn_deriv,
    is_density_of,
)
from .distribution import (
    GaussianDistribution,
    Degenerate,
    Continuous,
    GaussianReal,
    distribution,
    gaussian_real,
)

__all__ = [
    "InvalidParameter",
    "QuadratureConfig",
    "DEFAULT_CONFIG",
    "density",
    "density_ext",
    "log_density",
    "to_ennreal",
    "density_sub",
    "density_add",
    "density_inv_mul",
    "density_mul",
    "MeasurableSet",
    "Interval",
    "IntervalUnion",
    "point",
    "points",
    "closed",
    "open_",
    "below",
    "above",
    "REAL_LINE",
    "EMPTY",
    "Measure",
    "LebesgueMeasure",
    "DiracMeasure",
    "WithDensity",
    "NotAbsolutelyContinuous",
    "absolutely_continuous",
    "rn_deriv",
    "is_density_of",
    "GaussianDistribution",
    "Degenerate",
    "Continuous",
    "GaussianReal",
    "distribution",
    "gaussian_real",
]
