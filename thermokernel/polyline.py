"""Polyline time-temperature curves."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .curve import (
    DuplicateTimeError,
    EmptyPointsError,
    InvalidValueError,
    TimeTemperatureCurve,
    polyline_temperature_at,
)

# Machine epsilon of a single-precision float.
TIME_EPSILON = 1.1920929e-07

Point = tuple[float, float]


def _as_points(points: Iterable[tuple[float, float]]) -> list[Point]:
    return [(float(t), float(temp)) for t, temp in points]


def _is_finite(point: Point) -> bool:
    return math.isfinite(point[0]) and math.isfinite(point[1])


def _has_duplicate_neighbours(points: list[Point]) -> bool:
    return any(abs(a[0] - b[0]) < TIME_EPSILON for a, b in zip(points, points[1:]))


@dataclass(frozen=True)
class Polyline(TimeTemperatureCurve):
    """A curve through points sorted by time, linear between them."""

    points: tuple[Point, ...]

    def __init__(self, points: Iterable[tuple[float, float]]) -> None:
        pts = _as_points(points)
        if not pts:
            raise EmptyPointsError("a polyline needs at least one point")
        if not all(_is_finite(p) for p in pts):
            raise InvalidValueError("NaN or infinite value in polyline")
        pts.sort(key=lambda p: p[0])
        if _has_duplicate_neighbours(pts):
            raise DuplicateTimeError("duplicate time value in polyline")
        object.__setattr__(self, "points", tuple(pts))

    def temperature_at(self, time: float) -> float:
        return polyline_temperature_at(self.points, time)


@dataclass(frozen=True)
class FixedPolyline(TimeTemperatureCurve):
    """A polyline whose points are given already in time order."""

    points: tuple[Point, ...]

    @classmethod
    def from_array(cls, points: Iterable[tuple[float, float]]) -> FixedPolyline:
        """Validate ``points`` as given, without sorting, and build a curve."""
        pts = _as_points(points)
        for i, point in enumerate(pts):
            if not _is_finite(point):
                raise InvalidValueError("NaN or infinite value in polyline")
            if i > 0 and abs(point[0] - pts[i - 1][0]) < TIME_EPSILON:
                raise DuplicateTimeError("duplicate time value in polyline")
        return cls(tuple(pts))

    def temperature_at(self, time: float) -> float:
        return polyline_temperature_at(self.points, time)