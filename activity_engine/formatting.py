"""Human-readable formatting for board views."""

from __future__ import annotations

import math
from typing import Optional

from activity_engine.schema import HOUR_MS, MAX_ENERGY

_FILLED_DOT = "●"
_EMPTY_DOT = "○"


def format_time_since(ms: Optional[float]) -> str:
    if ms is None:
        return "Never done"
    hours = ms / HOUR_MS
    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{math.floor(hours)}h ago"
    days = math.floor(hours / 24)
    if days == 1:
        return "Yesterday"
    return f"{days}d ago"


def format_time_remaining(ms: float) -> str:
    hours = ms / HOUR_MS
    if hours < 1:
        return f"{math.ceil(ms / 60_000)}m"
    if hours < 24:
        return f"{math.ceil(hours)}h"
    return f"{math.ceil(hours / 24)}d"


def format_duration(ms: float) -> str:
    total_minutes = math.floor(ms / 60_000 + 0.5)
    if total_minutes < 60:
        return f"{total_minutes}m"
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m" if minutes > 0 else f"{hours}h"


def format_timer_display(ms: float) -> str:
    total_seconds = max(0, math.ceil(ms / 1000))
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def energy_dots(cost: int) -> str:
    """Render an energy cost as filled/empty dots, e.g. 2 -> "●●○"."""

    filled = max(0, min(cost, MAX_ENERGY))
    return _FILLED_DOT * filled + _EMPTY_DOT * (MAX_ENERGY - filled)
