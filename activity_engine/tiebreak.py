"""Deterministic daily ordering for equal-priority activities."""

from __future__ import annotations

import zlib
from datetime import date
from typing import Iterable, Iterator

_MASK32 = 0xFFFFFFFF


def daily_seed(day: date) -> int:
    return day.year * 10000 + day.month * 100 + day.day


def mulberry32(seed: int) -> Iterator[float]:
    """Yield floats in [0, 1) from a mulberry32 generator."""

    state = seed & _MASK32
    while True:
        state = (state + 0x6D2B79F5) & _MASK32
        t = ((state ^ (state >> 15)) * (state | 1)) & _MASK32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32
        yield ((t ^ (t >> 14)) & _MASK32) / 4294967296


def tiebreak_value(activity_id: str, day: date) -> float:
    """Draw for one activity on one day, independent of any other activity."""

    seed = daily_seed(day) ^ zlib.crc32(activity_id.encode("utf-8"))
    return next(mulberry32(seed))


def daily_tiebreak_values(activity_ids: Iterable[str], day: date) -> dict[str, float]:
    return {activity_id: tiebreak_value(activity_id, day) for activity_id in set(activity_ids)}
