"""Piecewise-linear curve interpolation."""

from __future__ import annotations

from typing import Iterable, Sequence

from activity_engine.schema import CurvePoint, HourlyPoint


def interpolate(x: float, points: Iterable[tuple[float, float]], default: float) -> float:
    """Interpolate y at x over (x, y) control points with flat extrapolation."""

    ordered = sorted(points, key=lambda point: point[0])
    if not ordered:
        return default
    if x <= ordered[0][0]:
        return ordered[0][1]
    if x >= ordered[-1][0]:
        return ordered[-1][1]

    for (x0, y0), (x1, y1) in zip(ordered, ordered[1:]):
        if x0 <= x <= x1:
            return y0 + (x - x0) / (x1 - x0) * (y1 - y0)
    return ordered[-1][1]


def interpolate_curve(days_since_last: float, points: Sequence[CurvePoint]) -> float:
    """Priority at `days_since_last`; 0 for an empty curve."""

    return interpolate(days_since_last, ((p.days, p.priority) for p in points), default=0.0)


def interpolate_hourly_curve(hour: float, points: Sequence[HourlyPoint]) -> float:
    """Multiplier at `hour`; 1 for an empty curve."""

    return interpolate(hour, ((p.hour, p.multiplier) for p in points), default=1.0)


def curve_max_priority(points: Sequence[CurvePoint]) -> float:
    return max((p.priority for p in points), default=0.0)
