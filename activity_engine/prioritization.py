"""Activity scoring engine and result assembly."""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from datetime import date, datetime
from typing import Optional, Sequence

from activity_engine.config import BUCKET_MODELS, settings
from activity_engine.curves import curve_max_priority, interpolate_curve, interpolate_hourly_curve
from activity_engine.frequency import decay_constant_ms, expected_interval_ms
from activity_engine.recent_frequency import recent_frequency
from activity_engine.schema import (
    DAY_MS,
    HOUR_MS,
    HOURS_PER_DAY,
    MAX_ENERGY,
    SECTION_AVAILABLE,
    SECTION_COOLDOWN,
    SECTION_TOO_TIRED,
    SECTION_WRONG_TIME,
    Activity,
    CurvePoint,
    CurvePolicy,
    LegacyPolicy,
    PrioritizedActivity,
    PrioritizedResult,
    Session,
)
from activity_engine.tiebreak import daily_tiebreak_values

logger = logging.getLogger(__name__)

NEVER_DONE_BONUS = 5.0


def group_sessions(sessions: Sequence[Session]) -> dict[str, list[Session]]:
    """Group sessions by activity id, newest first within each group."""

    by_activity: dict[str, list[Session]] = defaultdict(list)
    for session in sessions:
        by_activity[session.activity_id].append(session)
    for group in by_activity.values():
        group.sort(key=lambda s: s.started_at, reverse=True)
    return by_activity


def legacy_score(policy: LegacyPolicy, time_since_last_ms: Optional[float], session_count: int) -> float:
    """Overdue-ratio score for activities without a usable priority curve."""

    score = 0.0
    expected = expected_interval_ms(policy.frequency)

    if time_since_last_ms is not None:
        if expected:
            score += time_since_last_ms / expected * 10
        elif policy.frequency.type == "freeform":
            score += time_since_last_ms / DAY_MS * 0.5

        recency_penalty = math.exp(-time_since_last_ms / decay_constant_ms(policy.frequency)) * 5
        score -= recency_penalty

    if session_count == 0:
        score += NEVER_DONE_BONUS

    return score


def legacy_cooldown_remaining_ms(policy: LegacyPolicy, time_since_last_ms: Optional[float]) -> Optional[float]:
    if policy.cooldown_hours and time_since_last_ms is not None:
        cooldown_ms = policy.cooldown_hours * HOUR_MS
        if time_since_last_ms < cooldown_ms:
            return cooldown_ms - time_since_last_ms
    return None


def curve_cooldown_remaining_ms(points: Sequence[CurvePoint], days_since_last: float) -> Optional[float]:
    """Time until the next control point with positive priority, if the curve is at zero now.

    The curve can start rising before that point; the gap is measured to the
    point itself.
    """

    if interpolate_curve(days_since_last, points) > 0:
        return None
    ordered = sorted(points, key=lambda p: p.days)
    upcoming = next((p for p in ordered if p.days > days_since_last and p.priority > 0), None)
    if upcoming is None:
        return None
    return (upcoming.days - days_since_last) * DAY_MS


def _clamp_hour(current_hour: int) -> int:
    hour = min(HOURS_PER_DAY - 1, max(0, int(current_hour)))
    if hour != current_hour:
        logger.warning("Hour %s out of range, clamped to %d", current_hour, hour)
    return hour


def _check_energy(name: str, value: int) -> None:
    if not 0 <= value <= MAX_ENERGY:
        raise ValueError(f"{name} must be between 0 and {MAX_ENERGY}, got {value}")


def _sort_available(entries: list[PrioritizedActivity], day: date, tiebreak: bool) -> list[PrioritizedActivity]:
    """Sort by score descending, shuffling near-ties by the daily draw.

    A tie group holds the scores within epsilon of its highest score, so
    scores further apart than epsilon are never reordered.
    """

    ordered = sorted(entries, key=lambda e: e.score, reverse=True)
    if not tiebreak:
        return ordered

    epsilon = settings.TIE_EPSILON
    draws = daily_tiebreak_values((e.activity.id for e in ordered), day)

    groups: list[list[PrioritizedActivity]] = []
    for item in ordered:
        if groups and groups[-1][0].score - item.score < epsilon:
            groups[-1].append(item)
        else:
            groups.append([item])

    shuffled: list[PrioritizedActivity] = []
    for group in groups:
        shuffled.extend(sorted(group, key=lambda e: (draws[e.activity.id], e.activity.id)))
    return shuffled


def prioritize_activities(
    activities: Sequence[Activity],
    sessions: Sequence[Session],
    mental_energy: int,
    physical_energy: int,
    current_hour: int,
    now_ms: int,
    *,
    today: Optional[date] = None,
    bucket_model: Optional[str] = None,
    tiebreak: bool = True,
) -> PrioritizedResult:
    """Score every activity and place it in exactly one section.

    With the canonical "three" bucket model a cooldown is just the
    zero-priority stretch of the curve, so such activities stay `available`
    with score 0. The "four" bucket model is kept for older consumers and
    routes them to a separate `cooldown` section with the time remaining.
    """

    model = bucket_model or settings.BUCKET_MODEL
    if model not in BUCKET_MODELS:
        raise ValueError(f"Unknown bucket model '{model}', expected one of {BUCKET_MODELS}")
    _check_energy("mental_energy", mental_energy)
    _check_energy("physical_energy", physical_energy)
    hour = _clamp_hour(current_hour)
    day = today or datetime.fromtimestamp(now_ms / 1000).date()

    by_activity = group_sessions(sessions)
    result = PrioritizedResult(bucket_model=model)
    available: list[PrioritizedActivity] = []

    for activity in activities:
        history = by_activity.get(activity.id, [])
        last_session = history[0] if history else None
        time_since_last_ms = now_ms - last_session.started_at if last_session else None

        def entry(section: str, score: float, cooldown_remaining_ms: Optional[float] = None) -> PrioritizedActivity:
            return PrioritizedActivity(
                activity=activity,
                section=section,
                score=score,
                last_session=last_session,
                time_since_last_ms=time_since_last_ms,
                session_count=len(history),
                recent_frequency=recent_frequency(history, now_ms),
                cooldown_remaining_ms=cooldown_remaining_ms,
            )

        # 1. energy filter
        if mental_energy < activity.mental_energy_cost or physical_energy < activity.physical_energy_cost:
            result.too_tired.append(entry(SECTION_TOO_TIRED, 0.0))
            continue

        # 2. time-of-day filter
        tier = activity.tier_at(hour)
        hour_multiplier = None
        if activity.has_hourly_curve:
            hour_multiplier = interpolate_hourly_curve(hour, activity.hourly_priority_curve)
            if hour_multiplier <= 0:
                result.wrong_time.append(entry(SECTION_WRONG_TIME, 0.0))
                continue
        elif tier == "impossible":
            result.wrong_time.append(entry(SECTION_WRONG_TIME, 0.0))
            continue

        # 3. energy match
        energy_waste = (mental_energy - activity.mental_energy_cost) + (physical_energy - activity.physical_energy_cost)
        energy_multiplier = settings.ENERGY_MATCH_BASE**energy_waste

        # 4. base score
        policy = activity.scoring_policy
        if isinstance(policy, CurvePolicy):
            if time_since_last_ms is None:
                score = curve_max_priority(policy.points)
            else:
                days_since_last = time_since_last_ms / DAY_MS
                if model == "four":
                    remaining = curve_cooldown_remaining_ms(policy.points, days_since_last)
                    if remaining is not None:
                        result.cooldown.append(entry(SECTION_COOLDOWN, 0.0, remaining))
                        continue
                score = interpolate_curve(days_since_last, policy.points)
        else:
            remaining = legacy_cooldown_remaining_ms(policy, time_since_last_ms)
            if remaining is not None and model == "four":
                result.cooldown.append(entry(SECTION_COOLDOWN, 0.0, remaining))
                continue
            if remaining is not None:
                score = 0.0
            else:
                score = legacy_score(policy, time_since_last_ms, len(history))

        # 5. time-of-day dampening
        if hour_multiplier is not None:
            score *= hour_multiplier
        elif activity.has_preferred_hours and tier == "possible":
            score *= settings.POSSIBLE_HOUR_DAMPENING

        # 6. energy match
        score *= energy_multiplier

        if not math.isfinite(score):
            logger.warning("Non-finite score for activity '%s', using 0", activity.id)
            score = 0.0

        available.append(entry(SECTION_AVAILABLE, score))

    result.available = _sort_available(available, day, tiebreak)
    logger.debug(
        "Prioritized %d activities: %d available, %d wrong time, %d too tired, %d cooldown",
        len(activities),
        len(result.available),
        len(result.wrong_time),
        len(result.too_tired),
        len(result.cooldown),
    )
    return result
