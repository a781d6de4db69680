"""Core data schema for activities, sessions and prioritized views."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

HOURS_PER_DAY = 24
HOUR_MS = 3_600_000
DAY_MS = 24 * HOUR_MS
WEEK_MS = 7 * DAY_MS

MAX_ENERGY = 3

FREQUENCY_TYPES = ("daily", "weekly", "per_period", "freeform")
HOUR_TIERS = ("preferred", "possible", "impossible")

SECTION_AVAILABLE = "available"
SECTION_COOLDOWN = "cooldown"
SECTION_WRONG_TIME = "wrong_time"
SECTION_TOO_TIRED = "too_tired"


def default_hour_tiers() -> list[str]:
    return ["possible"] * HOURS_PER_DAY


def timestamp_to_ms(value: Union[int, float, str]) -> int:
    """Epoch milliseconds from an int/float or a numeric or ISO-8601 string.

    Naive ISO timestamps are read as local time.
    """

    if isinstance(value, bool):
        raise ValueError(f"invalid timestamp {value!r}")
    if isinstance(value, (int, float)):
        return int(value)
    text = str(value).strip()
    if text.lstrip("-").isdigit():
        return int(text)
    return int(datetime.fromisoformat(text).timestamp() * 1000)


@dataclass
class TargetFrequency:
    """Coarse frequency target used by activities without a priority curve."""

    type: str
    times_per_period: Optional[float] = None
    period_days: Optional[float] = None


@dataclass(frozen=True)
class CurvePoint:
    days: float
    priority: float


@dataclass(frozen=True)
class HourlyPoint:
    hour: float
    multiplier: float


@dataclass(frozen=True)
class CurvePolicy:
    """Score from a days-since-last-done curve."""

    points: tuple[CurvePoint, ...]


@dataclass(frozen=True)
class LegacyPolicy:
    """Score from the target frequency and optional cooldown."""

    frequency: TargetFrequency
    cooldown_hours: Optional[float]


ScoringPolicy = Union[CurvePolicy, LegacyPolicy]


@dataclass
class Activity:
    """A recurring activity in the catalog."""

    id: str
    name: str
    category: str
    mental_energy_cost: int
    physical_energy_cost: int
    target_frequency: TargetFrequency = field(default_factory=lambda: TargetFrequency("freeform"))
    cooldown_hours: Optional[float] = None
    priority_curve: list[CurvePoint] = field(default_factory=list)
    hour_tiers: list[str] = field(default_factory=default_hour_tiers)
    hourly_priority_curve: list[HourlyPoint] = field(default_factory=list)
    is_active: bool = True
    is_temporary: bool = False
    paused_until: Optional[int] = None
    notes: str = ""
    created_at: int = 0

    @property
    def scoring_policy(self) -> ScoringPolicy:
        if len(self.priority_curve) >= 2:
            return CurvePolicy(tuple(self.priority_curve))
        return LegacyPolicy(self.target_frequency, self.cooldown_hours)

    @property
    def has_hourly_curve(self) -> bool:
        return len(self.hourly_priority_curve) >= 2

    def tier_at(self, hour: int) -> str:
        if 0 <= hour < len(self.hour_tiers):
            return self.hour_tiers[hour]
        return "possible"

    @property
    def has_preferred_hours(self) -> bool:
        return "preferred" in self.hour_tiers


@dataclass(frozen=True)
class Session:
    """Immutable completion record for one "do" action."""

    id: str
    activity_id: str
    started_at: int
    mental_energy_cost_at_time: int
    physical_energy_cost_at_time: int
    note: Optional[str] = None
    duration_ms: Optional[int] = None

    @classmethod
    def for_activity(
        cls,
        session_id: str,
        activity: Activity,
        started_at: int,
        note: Optional[str] = None,
        duration_ms: Optional[int] = None,
    ) -> "Session":
        """Log a completion, snapshotting the activity's current energy costs."""

        return cls(
            id=session_id,
            activity_id=activity.id,
            started_at=started_at,
            mental_energy_cost_at_time=activity.mental_energy_cost,
            physical_energy_cost_at_time=activity.physical_energy_cost,
            note=note,
            duration_ms=duration_ms,
        )


@dataclass
class PrioritizedActivity:
    """Derived, per-pass view of an activity; never persisted."""

    activity: Activity
    section: str
    score: float
    last_session: Optional[Session]
    time_since_last_ms: Optional[int]
    session_count: int
    recent_frequency: str
    cooldown_remaining_ms: Optional[float] = None

    def as_dict(self) -> dict:
        payload = {
            "id": self.activity.id,
            "name": self.activity.name,
            "category": self.activity.category,
            "section": self.section,
            "score": self.score,
            "last_started_at": self.last_session.started_at if self.last_session else None,
            "time_since_last_ms": self.time_since_last_ms,
            "session_count": self.session_count,
            "recent_frequency": self.recent_frequency,
        }
        if self.cooldown_remaining_ms is not None:
            payload["cooldown_remaining_ms"] = self.cooldown_remaining_ms
        return payload


@dataclass
class PrioritizedResult:
    """Every activity in exactly one section; `available` sorted by score."""

    bucket_model: str
    available: list[PrioritizedActivity] = field(default_factory=list)
    wrong_time: list[PrioritizedActivity] = field(default_factory=list)
    too_tired: list[PrioritizedActivity] = field(default_factory=list)
    cooldown: list[PrioritizedActivity] = field(default_factory=list)

    def section(self, name: str) -> list[PrioritizedActivity]:
        return getattr(self, name)

    def as_dict(self) -> dict:
        payload = {
            SECTION_AVAILABLE: [item.as_dict() for item in self.available],
            SECTION_WRONG_TIME: [item.as_dict() for item in self.wrong_time],
            SECTION_TOO_TIRED: [item.as_dict() for item in self.too_tired],
        }
        if self.bucket_model == "four":
            payload[SECTION_COOLDOWN] = [item.as_dict() for item in self.cooldown]
        return payload
