"""Home board: split paused activities off, then prioritize the rest."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from activity_engine.formatting import format_time_remaining
from activity_engine.prioritization import prioritize_activities
from activity_engine.schema import WEEK_MS, Activity, PrioritizedResult, Session


@dataclass
class Board:
    """Prioritized result plus the activities currently paused."""

    result: PrioritizedResult
    paused: list[Activity] = field(default_factory=list)

    def as_dict(self, now_ms: int) -> dict:
        payload = self.result.as_dict()
        payload["paused"] = [
            {
                "id": activity.id,
                "name": activity.name,
                "paused_until": activity.paused_until,
                "resumes_in": format_time_remaining(activity.paused_until - now_ms),
            }
            for activity in self.paused
        ]
        return payload


def is_paused(activity: Activity, now_ms: int) -> bool:
    return activity.paused_until is not None and activity.paused_until > now_ms


def pause_until(now_ms: int, weeks: float) -> int:
    """Timestamp at which an activity paused now for `weeks` resumes."""

    if weeks <= 0:
        raise ValueError("weeks must be positive")
    return int(now_ms + weeks * WEEK_MS)


def build_board(
    activities: Sequence[Activity],
    sessions: Sequence[Session],
    mental_energy: int,
    physical_energy: int,
    current_hour: int,
    now_ms: int,
    *,
    today: Optional[date] = None,
    bucket_model: Optional[str] = None,
) -> Board:
    """Drop archived activities, set paused ones aside and score the remainder."""

    active = [activity for activity in activities if activity.is_active]
    paused = [activity for activity in active if is_paused(activity, now_ms)]
    candidates = [activity for activity in active if not is_paused(activity, now_ms)]

    result = prioritize_activities(
        candidates,
        sessions,
        mental_energy,
        physical_energy,
        current_hour,
        now_ms,
        today=today,
        bucket_model=bucket_model,
    )
    return Board(result=result, paused=sorted(paused, key=lambda a: a.paused_until))
