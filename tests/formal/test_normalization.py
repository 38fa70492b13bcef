"""
Formal tests: the Gaussian density integrates to 1 and GaussianReal(μ, v) is a
probability measure for every v ≥ 0.
"""
from functools import partial
import math

import numpy as np
import pytest

from fixtures import param_grid
from gauss_measure.density import density
from gauss_measure.distribution import Continuous, Degenerate, distribution
from gauss_measure.measure import LebesgueMeasure
from gauss_measure.params import InvalidParameter
from gauss_measure.sets import REAL_LINE, Interval, above, below, closed, open_


def test_density_integrates_to_one_by_quadrature() -> None:
    leb = LebesgueMeasure()
    for m, v in param_grid():
        d = distribution(m, v)
        total = leb.integrate(partial(density, m, v), REAL_LINE, breakpoints=d.breakpoints())
        assert abs(total - 1.0) <= 1e-6, f"mean={m} variance={v} integral={total}"


def test_integral_of_density_matches_closed_form_total() -> None:
    for m, v in param_grid():
        d = distribution(m, v)
        assert isinstance(d, Continuous)
        assert abs(d.integral_of_density(REAL_LINE) - 1.0) <= 1e-6


@pytest.mark.parametrize("mean", [-4.0, 0.0, 2.0, 1e3])
@pytest.mark.parametrize("variance", [0.0, 1e-6, 1.0, 3.0, 1e4])
def test_total_mass_is_one(mean: float, variance: float) -> None:
    d = distribution(mean, variance)
    assert abs(d.total_mass() - 1.0) <= 1e-12
    assert abs(d.probability_of(REAL_LINE) - 1.0) <= 1e-12
    assert d.as_measure().is_probability(tol=1e-6)


def test_construction_with_quadrature_mass_check() -> None:
    for m, v in [(0.0, 1.0), (2.0, 3.0), (-1.0, 1e-4)]:
        d = distribution(m, v, check_by_quadrature=True)
        assert isinstance(d, Continuous)
    assert isinstance(distribution(5.0, 0.0, check_by_quadrature=True), Degenerate)


def test_total_mass_violation_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Continuous, "probability_of", lambda self, s: 0.9)
    with pytest.raises(InvalidParameter):
        distribution(0.0, 1.0)


def test_scenario_half_mass_below_mean() -> None:
    d = distribution(2.0, 3.0)
    s = below(2.0)
    assert abs(d.probability_of(s) - 0.5) <= 1e-12
    assert abs(d.integral_of_density(s) - 0.5) <= 1e-8
    raw = LebesgueMeasure().integrate(partial(density, 2.0, 3.0), s, breakpoints=d.breakpoints())
    assert abs(raw - 0.5) <= 1e-6
    # The mean itself carries no mass.
    assert abs(d.probability_of(below(2.0, inclusive=True)) - 0.5) <= 1e-12


def test_closed_form_agrees_with_quadrature_on_intervals() -> None:
    d = distribution(0.5, 2.0)
    sets = [
        closed(-1.0, 1.0),
        open_(0.5, 3.0),
        Interval(-10.0, -2.0, False, True),
        above(1.75),
        below(-0.25) | closed(1.0, 2.0),
    ]
    for s in sets:
        assert np.isclose(d.probability_of(s), d.integral_of_density(s), rtol=0.0, atol=1e-8)


def test_probability_values_stay_in_unit_interval() -> None:
    d = distribution(-1.0, 0.5)
    for s in [closed(-100.0, 100.0), below(-1.0) | above(-1.0), above(30.0), closed(-1.0, -1.0)]:
        p = d.probability_of(s)
        assert 0.0 <= p <= 1.0
        assert not math.isnan(p)


def test_narrow_peak_below_float_spacing_integrates_to_one() -> None:
    # σ = 1e-20 is far below the spacing of floats near 1.0.
    d = distribution(1.0, 1e-40)
    assert isinstance(d, Continuous)
    assert abs(d.integral_of_density(REAL_LINE) - 1.0) <= 1e-6
    assert abs(d.integral_of_density(below(1.0)) - 0.5) <= 1e-6
    assert d.integral_of_density(above(2.0)) == 0.0
    checked = distribution(1.0, 1e-40, check_by_quadrature=True)
    assert checked == Continuous(1.0, 1e-40)
