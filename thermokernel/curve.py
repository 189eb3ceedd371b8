"""Time-temperature curve interface, its errors and shared interpolation."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from bisect import bisect_left
from collections.abc import Sequence


class TimeTemperatureCurveError(ValueError):
    """Base class for time-temperature curve errors."""


class EmptyPointsError(TimeTemperatureCurveError):
    """A curve was created with no points."""


class DuplicateTimeError(TimeTemperatureCurveError):
    """Two points share the same time value."""


class InvalidValueError(TimeTemperatureCurveError):
    """A time or temperature is NaN or infinite."""


class TimeTemperatureCurve(ABC):
    """A strategy that maps a time to a temperature."""

    @abstractmethod
    def temperature_at(self, time: float) -> float:
        """Return the temperature at ``time``."""


def polyline_temperature_at(points: Sequence[tuple[float, float]], time: float) -> float:
    """Linearly interpolate ``points`` (sorted by time) at ``time``.

    Times before the first point or after the last take that point's
    temperature; an empty sequence yields 0.0.
    """
    if not math.isfinite(time):
        raise InvalidValueError(f"time must be finite, got {time}")
    if not points:
        return 0.0
    first_time, first_temp = points[0]
    last_time, last_temp = points[-1]
    if time <= first_time:
        return first_temp
    if time >= last_time:
        return last_temp
    idx = bisect_left(points, time, key=lambda point: point[0])
    if points[idx][0] == time:
        return points[idx][1]
    t0, temp0 = points[idx - 1]
    t1, temp1 = points[idx]
    ratio = (time - t0) / (t1 - t0)
    return temp0 + ratio * (temp1 - temp0)