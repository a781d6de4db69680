"""Recency-weighted estimate of how often an activity is actually done."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from activity_engine.config import settings
from activity_engine.schema import DAY_MS, WEEK_MS, Session

NEVER_DONE = "Never done"
NEED_MORE_DATA = "Need more data"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_weekly_rate(rate_per_week: float) -> str:
    """Render a weekly-equivalent rate in the coarsest unit that reaches ~1."""

    if rate_per_week >= 6.5:
        per_day = _round_half_up(rate_per_week / 7)
        return "Daily" if per_day == 1 else f"{per_day}/day"
    if rate_per_week >= 0.95:
        per_week = _round_half_up(rate_per_week)
        return "Weekly" if per_week == 1 else f"{per_week}/week"

    per_month = rate_per_week * 30 / 7
    if per_month >= 0.95:
        count = _round_half_up(per_month)
        return "Monthly" if count == 1 else f"{count}/month"

    per_year = rate_per_week * 365 / 7
    if per_year >= 0.95:
        count = _round_half_up(per_year)
        return "Yearly" if count == 1 else f"{count}/year"
    return "Rarely"


def weighted_interval_ms(
    sessions: Sequence[Session],
    now_ms: int,
    half_life_days: Optional[float] = None,
) -> Optional[float]:
    """Exponentially recency-weighted mean gap between consecutive sessions.

    `sessions` must be sorted newest first. Each interval is weighted by its
    newer endpoint's age. Returns None when no positive interval carries weight.
    """

    half_life = (half_life_days or settings.FREQUENCY_HALF_LIFE_DAYS) * DAY_MS
    decay = math.log(2) / half_life

    starts = np.asarray([s.started_at for s in sessions], dtype=float)
    intervals = starts[:-1] - starts[1:]
    ages = np.maximum(now_ms - starts[:-1], 0.0)

    mask = intervals > 0
    if not mask.any():
        return None

    weights = np.exp(-decay * ages[mask])
    total = float(weights.sum())
    if total <= 0.0:
        return None
    return float(np.dot(weights, intervals[mask]) / total)


def recent_frequency(sessions: Sequence[Session], now_ms: int) -> str:
    """Human-readable actual cadence, e.g. "3/week", from newest-first sessions."""

    if not sessions:
        return NEVER_DONE
    if len(sessions) == 1:
        return NEED_MORE_DATA

    if len(sessions) == 2:
        interval = sessions[0].started_at - sessions[1].started_at
        if interval <= 0:
            return NEED_MORE_DATA
        return format_weekly_rate(WEEK_MS / interval)

    average = weighted_interval_ms(sessions, now_ms)
    if average is None or average <= 0:
        return NEED_MORE_DATA
    return format_weekly_rate(WEEK_MS / average)
