"""Target-frequency rules: default priority curves and legacy intervals."""

from __future__ import annotations

import logging
from typing import Optional

from activity_engine.schema import DAY_MS, HOUR_MS, WEEK_MS, CurvePoint, TargetFrequency

logger = logging.getLogger(__name__)

_FREEFORM_CURVE = ((0.0, 0.0), (14.0, 0.5), (30.0, 1.0))


def frequency_to_curve(frequency: TargetFrequency, cooldown_hours: Optional[float] = None) -> list[CurvePoint]:
    """Derive a days->priority curve from a coarse frequency and optional cooldown.

    A cooldown shifts the whole curve right, leaving a zero-priority region
    before the activity becomes due again.
    """

    if frequency.type == "daily":
        base = [(0.0, 0.0), (1.0, 1.0)]
    elif frequency.type == "weekly":
        base = [(0.0, 0.0), (7.0, 1.0)]
    elif frequency.type == "per_period":
        interval = (frequency.period_days or 7) / (frequency.times_per_period or 1)
        base = [(0.0, 0.0), (round(interval, 1), 1.0)]
    else:
        base = list(_FREEFORM_CURVE)

    cooldown_days = cooldown_hours / 24 if cooldown_hours else 0.0
    if cooldown_days > 0:
        return [CurvePoint(round(days + cooldown_days, 1), priority) for days, priority in base]
    return [CurvePoint(days, priority) for days, priority in base]


def expected_interval_ms(frequency: TargetFrequency) -> Optional[float]:
    """Expected gap between repeats; None for freeform activities."""

    if frequency.type == "daily":
        return float(DAY_MS)
    if frequency.type == "weekly":
        return float(WEEK_MS)
    if frequency.type == "per_period":
        if frequency.times_per_period and frequency.period_days:
            return frequency.period_days * 24 * HOUR_MS / frequency.times_per_period
        return float(WEEK_MS)
    if frequency.type == "freeform":
        return None

    logger.warning("Unknown target frequency type '%s', treating as weekly", frequency.type)
    return float(WEEK_MS)


def decay_constant_ms(frequency: TargetFrequency) -> float:
    interval = expected_interval_ms(frequency)
    if not interval:
        return WEEK_MS * 0.8
    return interval * 0.8
