from datetime import datetime

import pytest

from activity_engine.schema import (
    Activity,
    CurvePoint,
    CurvePolicy,
    HourlyPoint,
    LegacyPolicy,
    Session,
    TargetFrequency,
    timestamp_to_ms,
)


def test_scoring_policy_variants():
    legacy = Activity("a", "A", "Habits", 1, 0, target_frequency=TargetFrequency("daily"), cooldown_hours=12)
    assert legacy.scoring_policy == LegacyPolicy(TargetFrequency("daily"), 12)

    legacy.priority_curve = [CurvePoint(0, 0)]
    assert isinstance(legacy.scoring_policy, LegacyPolicy)

    legacy.priority_curve = [CurvePoint(0, 0), CurvePoint(1, 1)]
    assert legacy.scoring_policy == CurvePolicy((CurvePoint(0, 0), CurvePoint(1, 1)))


def test_hourly_curve_and_tiers():
    activity = Activity("a", "A", "Habits", 0, 0, hourly_priority_curve=[HourlyPoint(0, 1)])
    assert not activity.has_hourly_curve
    assert activity.tier_at(10) == "possible"
    assert activity.tier_at(99) == "possible"
    assert not activity.has_preferred_hours


def test_session_snapshots_costs():
    activity = Activity("a", "A", "Habits", 2, 1)
    session = Session.for_activity("s1", activity, 1_000, note="done", duration_ms=600_000)
    activity.mental_energy_cost = 3
    assert session.activity_id == "a"
    assert session.mental_energy_cost_at_time == 2
    assert session.physical_energy_cost_at_time == 1
    assert session.duration_ms == 600_000


def test_timestamp_to_ms():
    assert timestamp_to_ms(1_760_000_000_000) == 1_760_000_000_000
    assert timestamp_to_ms("1760000000000") == 1_760_000_000_000
    expected = int(datetime.fromisoformat("2025-10-01T19:00:00").timestamp() * 1000)
    assert timestamp_to_ms("2025-10-01T19:00:00") == expected
    with pytest.raises(ValueError):
        timestamp_to_ms("yesterday")
