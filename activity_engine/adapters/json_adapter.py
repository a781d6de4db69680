"""JSON adapter for activities and sessions."""

from __future__ import annotations

import json
import logging
from typing import Any

from activity_engine.schema import (
    HOUR_TIERS,
    HOURS_PER_DAY,
    MAX_ENERGY,
    Activity,
    CurvePoint,
    HourlyPoint,
    Session,
    TargetFrequency,
    default_hour_tiers,
    timestamp_to_ms,
)

logger = logging.getLogger(__name__)

_ACTIVITY_REQUIRED = {
    "id": "_id",
    "name": "name",
    "mental_energy_cost": "mentalEnergyCost",
    "physical_energy_cost": "physicalEnergyCost",
}
_SESSION_REQUIRED = {"activity_id": "activityId", "started_at": "startedAt"}


def _get(item: dict, snake: str, camel: str | None = None, default: Any = None) -> Any:
    if snake in item:
        return item[snake]
    if camel and camel in item:
        return item[camel]
    return default


def _missing(item: dict, required: dict[str, str]) -> list[str]:
    return [snake for snake, camel in required.items() if _get(item, snake, camel) in (None, "")]


def _energy(value: Any, field_name: str, index: int) -> int:
    try:
        cost = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: invalid {field_name}") from exc
    if not 0 <= cost <= MAX_ENERGY:
        raise ValueError(f"Item {index}: {field_name} must be between 0 and {MAX_ENERGY}")
    return cost


def _positive(raw: dict, snake: str, camel: str, index: int) -> float | None:
    value = _get(raw, snake, camel)
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: invalid {snake}") from exc
    if number <= 0:
        raise ValueError(f"Item {index}: {snake} must be positive")
    return number


def _flag(item: dict, snake: str, camel: str, default: bool, index: int) -> bool:
    value = _get(item, snake, camel, default)
    if not isinstance(value, bool):
        raise ValueError(f"Item {index}: {snake} must be true or false")
    return value


def _frequency(raw: Any, index: int) -> TargetFrequency:
    if raw is None:
        return TargetFrequency("freeform")
    if not isinstance(raw, dict) or not raw.get("type"):
        raise ValueError(f"Item {index}: target_frequency must be an object with a type")
    return TargetFrequency(
        type=str(raw["type"]).strip(),
        times_per_period=_positive(raw, "times_per_period", "timesPerPeriod", index),
        period_days=_positive(raw, "period_days", "periodDays", index),
    )


def _curve(raw: Any, index: int) -> list[CurvePoint]:
    try:
        return [CurvePoint(days=float(p["days"]), priority=float(p["priority"])) for p in raw or []]
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: malformed priority_curve") from exc


def _hourly_curve(raw: Any, index: int) -> list[HourlyPoint]:
    try:
        return [HourlyPoint(hour=float(p["hour"]), multiplier=float(p["multiplier"])) for p in raw or []]
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: malformed hourly_priority_curve") from exc


def _hour_tiers(raw: Any, index: int) -> list[str]:
    if raw is None:
        return default_hour_tiers()
    tiers = [str(tier).strip() for tier in raw]
    if len(tiers) != HOURS_PER_DAY:
        raise ValueError(f"Item {index}: hour_tiers must have {HOURS_PER_DAY} entries, got {len(tiers)}")
    invalid = sorted({tier for tier in tiers if tier not in HOUR_TIERS})
    if invalid:
        raise ValueError(f"Item {index}: invalid hour tiers {invalid}")
    return tiers


def _parse_activity(item: dict, index: int) -> Activity:
    missing = _missing(item, _ACTIVITY_REQUIRED)
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    paused_raw = _get(item, "paused_until", "pausedUntil")
    cooldown_raw = _get(item, "cooldown_hours", "cooldownHours")
    try:
        paused_until = timestamp_to_ms(paused_raw) if paused_raw is not None else None
        created_at = timestamp_to_ms(_get(item, "created_at", "createdAt", 0))
        cooldown_hours = float(cooldown_raw) if cooldown_raw is not None else None
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: malformed timestamp or cooldown") from exc

    return Activity(
        id=str(_get(item, "id", "_id")).strip(),
        name=str(item["name"]).strip(),
        category=str(item.get("category") or "").strip(),
        mental_energy_cost=_energy(_get(item, "mental_energy_cost", "mentalEnergyCost"), "mental_energy_cost", index),
        physical_energy_cost=_energy(
            _get(item, "physical_energy_cost", "physicalEnergyCost"), "physical_energy_cost", index
        ),
        target_frequency=_frequency(_get(item, "target_frequency", "targetFrequency"), index),
        cooldown_hours=cooldown_hours,
        priority_curve=_curve(_get(item, "priority_curve", "priorityCurve"), index),
        hour_tiers=_hour_tiers(_get(item, "hour_tiers", "hourTiers"), index),
        hourly_priority_curve=_hourly_curve(_get(item, "hourly_priority_curve", "hourlyPriorityCurve"), index),
        is_active=_flag(item, "is_active", "isActive", True, index),
        is_temporary=_flag(item, "is_temporary", "isTemporary", False, index),
        paused_until=paused_until,
        notes=str(item.get("notes") or ""),
        created_at=created_at,
    )


def _parse_session(item: dict, index: int) -> Session:
    missing = _missing(item, _SESSION_REQUIRED)
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        started_at = timestamp_to_ms(_get(item, "started_at", "startedAt"))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: malformed started_at") from exc

    duration_raw = _get(item, "duration_ms", "durationMs")
    try:
        duration_ms = int(duration_raw) if duration_raw is not None else None
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: invalid duration_ms") from exc

    return Session(
        id=str(_get(item, "id", "_id", f"session-{index}")),
        activity_id=str(_get(item, "activity_id", "activityId")).strip(),
        started_at=started_at,
        mental_energy_cost_at_time=_energy(
            _get(item, "mental_energy_cost_at_time", "mentalEnergyCostAtTime", 0), "mental_energy_cost_at_time", index
        ),
        physical_energy_cost_at_time=_energy(
            _get(item, "physical_energy_cost_at_time", "physicalEnergyCostAtTime", 0),
            "physical_energy_cost_at_time",
            index,
        ),
        note=item.get("note"),
        duration_ms=duration_ms,
    )


def _load_list(file_path: str) -> list:
    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")
    return payload


def parse_activities(file_path: str) -> list[Activity]:
    """Parse a JSON file of activity records."""

    activities = [_parse_activity(item, i) for i, item in enumerate(_load_list(file_path), start=1)]
    logger.info("Loaded %d activities from %s", len(activities), file_path)
    return activities


def parse_sessions(file_path: str) -> list[Session]:
    """Parse a JSON file of session records."""

    sessions = [_parse_session(item, i) for i, item in enumerate(_load_list(file_path), start=1)]
    logger.info("Loaded %d sessions from %s", len(sessions), file_path)
    return sessions
