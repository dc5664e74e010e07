from __future__ import annotations

import math
from fractions import Fraction
from typing import Sequence, Tuple

import numpy as np

from .model import Point

Vec2 = Tuple[float, float]


def _vec2(a: Vec2, b: Vec2) -> Vec2:
    return b[0] - a[0], b[1] - a[1]


def _dot2(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _norm2(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def point_distance(a: Point, b: Point) -> float:
    return (a - b).length()


def point_segment_distance(p: Point, a: Point, b: Point) -> float:
    """Shortest distance from ``p`` to the finite segment ``a``-``b``.

    A zero-length segment degrades to the point distance to ``a``.
    """

    pt = p.as_tuple()
    start = a.as_tuple()
    direction = _vec2(start, b.as_tuple())
    length_sq = _dot2(direction, direction)
    if length_sq == 0:
        return _norm2(_vec2(start, pt))
    t = _dot2(_vec2(start, pt), direction) / length_sq
    t = min(max(t, 0.0), 1.0)
    closest = (start[0] + t * direction[0], start[1] + t * direction[1])
    return _norm2(_vec2(closest, pt))


def _rational(value) -> Fraction:
    if isinstance(value, np.generic):
        value = value.item()
    return Fraction(value)


def exact_squared_distance(p: Point, a: Point) -> Fraction:
    """Squared distance from ``p`` to ``a`` without rounding."""

    dx = _rational(p.x) - _rational(a.x)
    dy = _rational(p.y) - _rational(a.y)
    return dx * dx + dy * dy


def exact_squared_segment_distance(p: Point, a: Point, b: Point) -> Fraction:
    """Squared distance from ``p`` to the finite segment ``a``-``b`` without rounding.

    Floats convert to fractions exactly, so two equal true distances always
    compare equal here.
    """

    dx = _rational(b.x) - _rational(a.x)
    dy = _rational(b.y) - _rational(a.y)
    rx = _rational(p.x) - _rational(a.x)
    ry = _rational(p.y) - _rational(a.y)
    length_sq = dx * dx + dy * dy
    projection = rx * dx + ry * dy
    if length_sq == 0 or projection <= 0:
        return rx * rx + ry * ry
    if projection >= length_sq:
        return exact_squared_distance(p, b)
    cross = rx * dy - ry * dx
    return cross * cross / length_sq


def as_array(points: Sequence[Point]) -> np.ndarray:
    """Stack points into an ``(n, 2)`` float array."""

    if not points:
        return np.zeros((0, 2), dtype=float)
    return np.array([p.as_tuple() for p in points], dtype=float)


def point_distances(p: Point, points: np.ndarray) -> np.ndarray:
    """Distances from ``p`` to every row of ``points``."""

    diff = points - np.array(p.as_tuple(), dtype=float)
    return np.hypot(diff[:, 0], diff[:, 1])


def point_segment_distances(p: Point, starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    """Vectorised :func:`point_segment_distance` over ``len(starts)`` segments."""

    pt = np.array(p.as_tuple(), dtype=float)
    direction = ends - starts
    rel = pt - starts
    length_sq = np.einsum("ij,ij->i", direction, direction)
    proj = np.einsum("ij,ij->i", rel, direction)
    t = np.divide(proj, length_sq, out=np.zeros_like(proj), where=length_sq > 0)
    t = np.clip(t, 0.0, 1.0)
    closest = starts + direction * t[:, None]
    diff = pt - closest
    return np.hypot(diff[:, 0], diff[:, 1])


__all__ = [
    "point_distance",
    "point_segment_distance",
    "exact_squared_distance",
    "exact_squared_segment_distance",
    "as_array",
    "point_distances",
    "point_segment_distances",
]
