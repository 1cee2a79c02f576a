"""Plane geometry: polygons, orientation, convex hulls and a ternary search."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True, order=True)
class Vector2:
    """A 2-D vector; ordering is by x, then y."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def cross(self, other: Vector2) -> float:
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.hypot(self.x, self.y)


PointLike = Union[Vector2, Sequence[float]]


def _vec(point: PointLike) -> Vector2:
    if isinstance(point, Vector2):
        return point
    x, y = point
    return Vector2(x, y)


def polygon_area(points: Sequence[PointLike]) -> float:
    """Area of a simple polygon given in clockwise or counter-clockwise order."""
    pts = [_vec(p) for p in points]
    twice = sum(a.cross(b) for a, b in zip(pts, pts[1:] + pts[:1]))
    return abs(twice) / 2


def point_in_polygon(point: PointLike, polygon: Sequence[PointLike]) -> bool:
    """Whether ``point`` lies inside ``polygon`` (ray casting to the right)."""
    p = _vec(point)
    pts = [_vec(v) for v in polygon]
    crossings = 0
    for a, b in zip(pts, pts[1:] + pts[:1]):
        if (a.y > p.y) != (b.y > p.y):
            x_at = (p.y - a.y) * (b.x - a.x) / (b.y - a.y) + a.x
            if x_at > p.x:
                crossings += 1
    return crossings % 2 == 1


def ccw(a: PointLike, b: PointLike, c: PointLike) -> float:
    """Positive if a-b-c turns left at b, negative if right, zero if collinear."""
    a, b, c = _vec(a), _vec(b), _vec(c)
    return (b - a).cross(c - a)


def segments_intersect(a: PointLike, b: PointLike, c: PointLike, d: PointLike) -> bool:
    """Whether segment ab and segment cd share at least one point."""
    a, b = sorted((_vec(a), _vec(b)))
    c, d = sorted((_vec(c), _vec(d)))
    x = ccw(a, b, c) * ccw(a, b, d)
    y = ccw(c, d, a) * ccw(c, d, b)
    if x == 0 and y == 0:
        return not (b < c or d < a)
    return x <= 0 and y <= 0


def convex_hull(points: Sequence[PointLike]) -> list[Vector2]:
    """Convex hull by gift wrapping, clockwise from the smallest point.

    Points lying on a hull edge between two corners are left out.
    """
    pts = [_vec(p) for p in points]
    if not pts:
        raise ValueError("convex hull of no points")
    hull = [min(pts)]
    while True:
        last = hull[-1]
        nxt = pts[0]
        for p in pts[1:]:
            turn = ccw(last, nxt, p)
            if turn > 0 or (turn == 0 and (p - last).norm() > (nxt - last).norm()):
                nxt = p
        if nxt == hull[0]:
            break
        hull.append(nxt)
    return hull


def _check_race(run_speeds: Sequence[float], cycle_speeds: Sequence[float]) -> None:
    if len(run_speeds) != len(cycle_speeds):
        raise ValueError("run and cycle speeds must have the same length")
    if len(run_speeds) < 2:
        raise ValueError("at least two competitors are required")


def _finish_time(total: float, run: float, cycle: float, run_length: float) -> float:
    return run_length / run + (total - run_length) / cycle


def winning_margin(
    total: float,
    run_speeds: Sequence[float],
    cycle_speeds: Sequence[float],
    run_length: float,
) -> float:
    """Lead of the last competitor over the fastest of the others."""
    _check_race(run_speeds, cycle_speeds)
    times = [_finish_time(total, r, c, run_length) for r, c in zip(run_speeds, cycle_speeds)]
    return min(times[:-1]) - times[-1]


def best_run_length(
    total: float,
    run_speeds: Sequence[float],
    cycle_speeds: Sequence[float],
) -> float:
    """Running distance in [0, total] that maximises the last competitor's lead."""
    _check_race(run_speeds, cycle_speeds)

    def margin(r: float) -> float:
        return winning_margin(total, run_speeds, cycle_speeds, r)

    lo, hi = 0.0, float(total)
    for _ in range(100):
        x = (2 * lo + hi) / 3
        y = (lo + 2 * hi) / 3
        fx, fy = margin(x), margin(y)
        if fx <= fy:
            lo = x
        if fx >= fy:
            hi = y
    return (lo + hi) / 2