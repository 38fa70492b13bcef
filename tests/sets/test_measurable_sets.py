import math

import pytest

from gauss_measure.params import InvalidParameter
from gauss_measure.sets import (
    EMPTY,
    REAL_LINE,
    Interval,
    IntervalUnion,
    above,
    below,
    closed,
    intersection,
    open_,
    point,
    points,
)


def test_adjacent_closed_intervals_merge() -> None:
    s = closed(0.0, 1.0) | closed(1.0, 2.0)
    assert s.intervals() == (closed(0.0, 2.0),)


def test_open_intervals_sharing_endpoint_stay_apart() -> None:
    s = open_(0.0, 1.0) | open_(1.0, 2.0)
    assert len(s.intervals()) == 2
    assert 1.0 not in s
    assert 0.5 in s and 1.5 in s
    filled = s | point(1.0)
    assert filled.intervals() == (open_(0.0, 2.0),)


def test_lebesgue_lengths() -> None:
    assert (closed(0.0, 2.0) | closed(1.0, 3.0)).lebesgue() == 3.0
    assert points(-1.0, 0.0, 4.0).lebesgue() == 0.0
    assert REAL_LINE.lebesgue() == math.inf
    assert above(2.0).lebesgue() == math.inf
    assert EMPTY.lebesgue() == 0.0
    assert Interval(1.0, 1.0, True, False).is_empty()


def test_complement() -> None:
    c = closed(0.0, 1.0).complement()
    assert c.intervals() == (below(0.0), above(1.0))
    assert -1.0 in c and 1.5 in c
    assert 0.0 not in c and 1.0 not in c
    assert REAL_LINE.complement().is_empty()
    assert EMPTY.complement().intervals() == (REAL_LINE,)
    # Complement of a point keeps everything else
    pc = point(2.0).complement()
    assert 2.0 not in pc and 2.0000001 in pc and pc.lebesgue() == math.inf


def test_difference_and_intersection() -> None:
    s = closed(0.0, 3.0) - open_(1.0, 2.0)
    assert s.intervals() == (closed(0.0, 1.0), closed(2.0, 3.0))
    assert s.lebesgue() == 2.0
    i = intersection(closed(0.0, 2.0), Interval(1.0, 5.0, False, True))
    assert i.intervals() == (Interval(1.0, 2.0, False, True),)
    assert intersection(closed(0.0, 1.0), closed(2.0, 3.0)).is_empty()
    assert intersection(closed(0.0, 1.0), open_(1.0, 2.0)).is_empty()
    assert intersection(closed(0.0, 1.0), closed(1.0, 2.0)).intervals() == (point(1.0),)


def test_infinite_endpoints_are_open() -> None:
    iv = Interval(-math.inf, 0.0, True, True)
    assert iv.lo_closed is False and iv.hi_closed is True
    assert iv == below(0.0, inclusive=True)


def test_shift_and_scale() -> None:
    s = closed(0.0, 1.0).shift(2.0)
    assert s == closed(2.0, 3.0)
    flipped = Interval(0.0, 1.0, True, False).scale(-1.0)
    assert flipped == Interval(-1.0, 0.0, False, True)
    assert 0.0 in flipped and -1.0 not in flipped
    assert closed(-1.0, 1.0).scale(0.0) == point(0.0)
    assert EMPTY.scale(0.0).is_empty()
    u = (below(0.0) | closed(1.0, 2.0)).shift(1.0)
    assert isinstance(u, IntervalUnion)
    assert u.intervals() == (below(1.0), closed(2.0, 3.0))


def test_malformed_bounds_rejected() -> None:
    with pytest.raises(InvalidParameter):
        Interval(2.0, 1.0)
    with pytest.raises(InvalidParameter):
        Interval(math.nan, 1.0)
    with pytest.raises(InvalidParameter):
        point(math.inf)
    with pytest.raises(TypeError):
        IntervalUnion((closed(0.0, 1.0), 3.0))  # type: ignore[arg-type]


def test_string_forms() -> None:
    assert str(closed(0.0, 1.0)) == "[0, 1]"
    assert str(point(2.0)) == "{2}"
    assert str(below(0.0) | above(1.0)) == "(-inf, 0) ∪ (1, inf)"
    assert str(EMPTY) == "∅"
