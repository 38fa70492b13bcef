"""Measurable subsets of the real line.

Every set is a finite union of intervals (single points are closed intervals of
zero length). Sets are immutable and normalize to a canonical, sorted list of
pairwise disjoint, non-adjacent, non-empty intervals.

Public API
- Interval(lo, hi, lo_closed=True, hi_closed=True)
- IntervalUnion(parts)
- point(a), points(*xs), closed(a, b), open_(a, b), below(a), above(a)
- REAL_LINE, EMPTY
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, Tuple

from .params import InvalidParameter, ensure_real


class MeasurableSet:
    """Base class for subsets of ℝ built from intervals."""

    def intervals(self) -> Tuple["Interval", ...]:
        raise NotImplementedError

    def contains(self, x: float) -> bool:
        x = float(x)
        return any(iv.contains(x) for iv in self.intervals())

    def __contains__(self, x: object) -> bool:
        return self.contains(x)  # type: ignore[arg-type]

    def lebesgue(self) -> float:
        """Length of the set; +inf for unbounded sets."""
        return float(sum(iv.length for iv in self.intervals()))

    def is_empty(self) -> bool:
        return len(self.intervals()) == 0

    def __or__(self, other: "MeasurableSet") -> "IntervalUnion":
        return IntervalUnion(self.intervals() + other.intervals())

    def complement(self) -> "IntervalUnion":
        """ℝ minus this set, as a union of intervals."""
        gaps: list[Interval] = []
        cursor, cursor_closed = -math.inf, False
        for iv in self.intervals():
            gap = Interval(cursor, iv.lo, cursor_closed, not iv.lo_closed)
            if not gap.is_empty():
                gaps.append(gap)
            cursor, cursor_closed = iv.hi, not iv.hi_closed
        tail = Interval(cursor, math.inf, cursor_closed, False)
        if not tail.is_empty():
            gaps.append(tail)
        return IntervalUnion(tuple(gaps))

    def __sub__(self, other: "MeasurableSet") -> "IntervalUnion":
        return intersection(self, other.complement())

    def shift(self, c: float) -> "IntervalUnion":
        """{x + c : x ∈ S}."""
        c = ensure_real(c, "c")
        return IntervalUnion(tuple(iv.shift(c) for iv in self.intervals()))

    def scale(self, c: float) -> "IntervalUnion":
        """{c · x : x ∈ S}."""
        c = ensure_real(c, "c")
        parts = self.intervals()
        if c == 0.0:
            return IntervalUnion((point(0.0),) if parts else ())
        return IntervalUnion(tuple(iv.scale(c) for iv in parts))


@dataclass(frozen=True)
class Interval(MeasurableSet):
    """
    Interval with optional closed endpoints. Infinite endpoints are always open.

    lo > hi is rejected; lo == hi with an open side is the empty set.
    """
    lo: float
    hi: float
    lo_closed: bool = True
    hi_closed: bool = True

    def __post_init__(self) -> None:
        lo = ensure_real(self.lo, "lo")
        hi = ensure_real(self.hi, "hi")
        if lo > hi:
            raise InvalidParameter(f"interval bounds out of order: lo={lo} > hi={hi}")
        object.__setattr__(self, "lo", lo)
        object.__setattr__(self, "hi", hi)
        object.__setattr__(self, "lo_closed", bool(self.lo_closed) and math.isfinite(lo))
        object.__setattr__(self, "hi_closed", bool(self.hi_closed) and math.isfinite(hi))

    def is_empty(self) -> bool:
        return self.lo == self.hi and not (self.lo_closed and self.hi_closed)

    def is_point(self) -> bool:
        return self.lo == self.hi and self.lo_closed and self.hi_closed

    @property
    def length(self) -> float:
        if self.is_empty():
            return 0.0
        return self.hi - self.lo

    def intervals(self) -> Tuple["Interval", ...]:
        return () if self.is_empty() else (self,)

    def contains(self, x: float) -> bool:
        x = float(x)
        if self.is_empty():
            return False
        above_lo = x > self.lo or (self.lo_closed and x == self.lo)
        below_hi = x < self.hi or (self.hi_closed and x == self.hi)
        return above_lo and below_hi

    def shift(self, c: float) -> "Interval":  # type: ignore[override]
        return Interval(self.lo + c, self.hi + c, self.lo_closed, self.hi_closed)

    def scale(self, c: float) -> "Interval":  # type: ignore[override]
        if c > 0.0:
            return Interval(self.lo * c, self.hi * c, self.lo_closed, self.hi_closed)
        if c < 0.0:
            return Interval(self.hi * c, self.lo * c, self.hi_closed, self.lo_closed)
        return point(0.0)

    def __str__(self) -> str:
        if self.is_point():
            return "{" + f"{self.lo:g}" + "}"
        left = "[" if self.lo_closed else "("
        right = "]" if self.hi_closed else ")"
        return f"{left}{self.lo:g}, {self.hi:g}{right}"


def _connected(a: Interval, b: Interval) -> bool:
    # Assumes a sorts before b.
    if b.lo < a.hi:
        return True
    return b.lo == a.hi and (a.hi_closed or b.lo_closed)


def _merge(a: Interval, b: Interval) -> Interval:
    lo_closed = a.lo_closed or (b.lo == a.lo and b.lo_closed)
    if b.hi > a.hi:
        hi, hi_closed = b.hi, b.hi_closed
    elif b.hi < a.hi:
        hi, hi_closed = a.hi, a.hi_closed
    else:
        hi, hi_closed = a.hi, a.hi_closed or b.hi_closed
    return Interval(a.lo, hi, lo_closed, hi_closed)


def normalize(parts: Iterable[Interval]) -> Tuple[Interval, ...]:
    """Sort and merge intervals into a canonical disjoint decomposition."""
    live = [iv for iv in parts if not iv.is_empty()]
    live.sort(key=lambda iv: (iv.lo, not iv.lo_closed))
    out: list[Interval] = []
    for iv in live:
        if out and _connected(out[-1], iv):
            out[-1] = _merge(out[-1], iv)
        else:
            out.append(iv)
    return tuple(out)


@dataclass(frozen=True)
class IntervalUnion(MeasurableSet):
    """Finite union of intervals, stored in canonical form."""
    parts: Tuple[Interval, ...] = ()

    def __post_init__(self) -> None:
        flat: list[Interval] = []
        for p in self.parts:
            if not isinstance(p, MeasurableSet):
                raise TypeError(f"union members must be measurable sets, got {type(p).__name__}")
            flat.extend(p.intervals())
        object.__setattr__(self, "parts", normalize(flat))

    def intervals(self) -> Tuple[Interval, ...]:
        return self.parts

    def __str__(self) -> str:
        if not self.parts:
            return "∅"
        return " ∪ ".join(str(iv) for iv in self.parts)


def intersection(a: MeasurableSet, b: MeasurableSet) -> IntervalUnion:
    out: list[Interval] = []
    for x in a.intervals():
        for y in b.intervals():
            if x.lo > y.lo or (x.lo == y.lo and not x.lo_closed):
                lo, lo_closed = x.lo, x.lo_closed
            else:
                lo, lo_closed = y.lo, y.lo_closed
            if x.hi < y.hi or (x.hi == y.hi and not x.hi_closed):
                hi, hi_closed = x.hi, x.hi_closed
            else:
                hi, hi_closed = y.hi, y.hi_closed
            if lo <= hi:
                out.append(Interval(lo, hi, lo_closed, hi_closed))
    return IntervalUnion(tuple(out))


def point(a: float) -> Interval:
    a = ensure_real(a, "a")
    if not math.isfinite(a):
        raise InvalidParameter("a point of the real line must be finite")
    return Interval(a, a, True, True)


def points(*xs: float) -> IntervalUnion:
    return IntervalUnion(tuple(point(x) for x in xs))


def closed(a: float, b: float) -> Interval:
    return Interval(a, b, True, True)


def open_(a: float, b: float) -> Interval:
    return Interval(a, b, False, False)


def below(a: float, inclusive: bool = False) -> Interval:
    """(−∞, a) or (−∞, a]."""
    return Interval(-math.inf, a, False, inclusive)


def above(a: float, inclusive: bool = False) -> Interval:
    """(a, ∞) or [a, ∞)."""
    return Interval(a, math.inf, inclusive, False)


REAL_LINE = Interval(-math.inf, math.inf, False, False)
EMPTY = IntervalUnion(())

__all__ = [
    "MeasurableSet",
    "Interval",
    "IntervalUnion",
    "normalize",
    "intersection",
    "point",
    "points",
    "closed",
    "open_",
    "below",
    "above",
    "REAL_LINE",
    "EMPTY",
]
