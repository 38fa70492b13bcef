from functools import partial
import math

import numpy as np

from gauss_measure.density import density
from gauss_measure.measure import DiracMeasure, LebesgueMeasure, WithDensity
from gauss_measure.sets import REAL_LINE, above, closed, point, points


def test_lebesgue_measure_and_integrals() -> None:
    leb = LebesgueMeasure()
    assert leb.measure_of(closed(0.0, 2.0) | closed(5.0, 5.5)) == 2.5
    assert leb.is_null(points(1.0, 2.0))
    assert np.isclose(leb.integrate(lambda x: 1.0, closed(0.0, 2.0)), 2.0)
    assert np.isclose(leb.integrate(lambda x: x, closed(0.0, 1.0)), 0.5)
    assert leb.integrate(lambda x: 1.0, point(3.0)) == 0.0
    assert np.isclose(leb.integrate(lambda x: math.exp(-x), above(0.0)), 1.0)


def test_breakpoints_let_quadrature_see_narrow_peaks() -> None:
    leb = LebesgueMeasure()
    f = partial(density, 0.0, 1e-8)
    sigma = 1e-4
    bps = [k * sigma for k in (-10.0, -2.0, -1.0, 0.0, 1.0, 2.0, 10.0)]
    assert abs(leb.integrate(f, REAL_LINE, breakpoints=bps) - 1.0) <= 1e-6


def test_dirac_measure() -> None:
    dm = DiracMeasure(2.0)
    assert dm.measure_of(closed(1.0, 3.0)) == 1.0
    assert dm.measure_of(points(1.0, 3.0)) == 0.0
    assert dm.integrate(lambda x: x * x, REAL_LINE) == 4.0
    assert dm.integrate(lambda x: x * x, above(2.0)) == 0.0
    assert dm.is_probability()


def test_with_density_measure() -> None:
    leb = LebesgueMeasure()

    def box(x: float) -> float:
        return 2.0 if 0.0 <= x <= 1.0 else 0.0

    m = WithDensity(leb, box, breakpoints=(0.0, 1.0))
    assert np.isclose(m.measure_of(closed(0.0, 1.0)), 2.0)
    assert np.isclose(m.measure_of(closed(-5.0, 0.5)), 1.0)
    assert m.measure_of(closed(2.0, 3.0)) == 0.0
    assert np.isclose(m.integrate(lambda x: x, closed(0.0, 1.0)), 1.0)


def test_with_density_over_dirac_base() -> None:
    m = WithDensity(DiracMeasure(1.0), lambda x: 3.0)
    assert m.measure_of(closed(0.0, 2.0)) == 3.0
    assert m.measure_of(point(0.0)) == 0.0
    assert not m.is_probability()
