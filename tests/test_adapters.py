import json

import pytest

from activity_engine.adapters.csv_adapter import parse as parse_csv
from activity_engine.adapters.json_adapter import parse_activities, parse_sessions
from activity_engine.schema import CurvePoint, HourlyPoint


def test_csv_parse_success(tmp_path):
    path = tmp_path / "sessions.csv"
    path.write_text(
        "id,activity_id,started_at,mental_energy_cost_at_time,physical_energy_cost_at_time,note,duration_ms\n"
        "s1,piano,1760000000000,2,0,scales,600000\n"
        "s2,piano,2025-10-01T19:00:00,2,0,,\n",
        encoding="utf-8",
    )
    sessions = parse_csv(str(path))
    assert len(sessions) == 2
    assert sessions[0].started_at == 1_760_000_000_000
    assert sessions[0].note == "scales"
    assert sessions[0].duration_ms == 600_000
    assert sessions[1].note is None
    assert sessions[1].duration_ms is None


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "sessions.csv"
    path.write_text("activity_id,started_at\npiano,bad\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_csv_parse_rejects_out_of_range_cost(tmp_path):
    path = tmp_path / "sessions.csv"
    path.write_text("activity_id,started_at,mental_energy_cost_at_time\npiano,1000,7\n", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_csv(str(path))


def test_json_parse_activities_camel_case(tmp_path):
    path = tmp_path / "activities.json"
    tiers = ["possible"] * 24
    tiers[3] = "impossible"
    payload = [
        {
            "_id": "piano",
            "name": "Piano practice",
            "category": "Skills",
            "mentalEnergyCost": 2,
            "physicalEnergyCost": 0,
            "targetFrequency": {"type": "per_period", "timesPerPeriod": 2, "periodDays": 7},
            "cooldownHours": 12,
            "priorityCurve": [{"days": 0, "priority": 0}, {"days": 3.5, "priority": 1}],
            "hourTiers": tiers,
            "hourlyPriorityCurve": [{"hour": 8, "multiplier": 0}, {"hour": 12, "multiplier": 1.5}],
            "pausedUntil": 1760600000000,
        },
        {"id": "walk", "name": "Walking", "mental_energy_cost": 0, "physical_energy_cost": 2},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")

    piano, walk = parse_activities(str(path))
    assert piano.id == "piano"
    assert piano.target_frequency.times_per_period == 2
    assert piano.cooldown_hours == 12.0
    assert piano.priority_curve == [CurvePoint(0, 0), CurvePoint(3.5, 1)]
    assert piano.hourly_priority_curve[1] == HourlyPoint(12, 1.5)
    assert piano.tier_at(3) == "impossible"
    assert piano.paused_until == 1_760_600_000_000
    assert walk.target_frequency.type == "freeform"
    assert walk.hour_tiers == ["possible"] * 24
    assert walk.is_active


@pytest.mark.parametrize(
    "item",
    [
        {"name": "No id", "mentalEnergyCost": 0, "physicalEnergyCost": 0},
        {"id": "a", "name": "A", "mentalEnergyCost": 4, "physicalEnergyCost": 0},
        {"id": "a", "name": "A", "mentalEnergyCost": 0, "physicalEnergyCost": 0, "hourTiers": ["possible"]},
        {"id": "a", "name": "A", "mentalEnergyCost": 0, "physicalEnergyCost": 0, "hourTiers": ["never"] * 24},
        {"id": "a", "name": "A", "mentalEnergyCost": 0, "physicalEnergyCost": 0, "priorityCurve": [{"days": 1}]},
    ],
)
def test_json_parse_activities_malformed(tmp_path, item):
    path = tmp_path / "activities.json"
    path.write_text(json.dumps([item]), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1"):
        parse_activities(str(path))


def test_json_parse_sessions(tmp_path):
    path = tmp_path / "sessions.json"
    payload = [
        {"activityId": "piano", "startedAt": 1760000000000, "mentalEnergyCostAtTime": 2, "durationMs": 60000},
        {"activity_id": "walk", "started_at": "2025-10-01T07:30:00"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    sessions = parse_sessions(str(path))
    assert [s.activity_id for s in sessions] == ["piano", "walk"]
    assert sessions[0].id == "session-1"
    assert sessions[0].mental_energy_cost_at_time == 2
    assert sessions[0].duration_ms == 60_000


def test_json_parse_malformed(tmp_path):
    path = tmp_path / "sessions.json"
    path.write_text(json.dumps([{"activityId": "a", "startedAt": "bad"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_sessions(str(path))


def test_json_payload_must_be_list(tmp_path):
    path = tmp_path / "sessions.json"
    path.write_text(json.dumps({"activityId": "a"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_sessions(str(path))


@pytest.mark.parametrize(
    "extra",
    [
        {"isActive": "false"},
        {"is_temporary": 1},
        {"targetFrequency": {"type": "per_period", "timesPerPeriod": -2, "periodDays": 7}},
        {"targetFrequency": {"type": "per_period", "timesPerPeriod": 2, "periodDays": 0}},
        {"targetFrequency": {"type": "per_period", "timesPerPeriod": "often", "periodDays": 7}},
    ],
)
def test_json_parse_activities_rejects_bad_flags_and_periods(tmp_path, extra):
    path = tmp_path / "activities.json"
    item = {"id": "a", "name": "A", "mentalEnergyCost": 0, "physicalEnergyCost": 0, **extra}
    path.write_text(json.dumps([item]), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1"):
        parse_activities(str(path))


def test_json_parse_activities_reads_boolean_flags(tmp_path):
    path = tmp_path / "activities.json"
    item = {"id": "a", "name": "A", "mentalEnergyCost": 0, "physicalEnergyCost": 0, "isActive": False, "isTemporary": True}
    path.write_text(json.dumps([item]), encoding="utf-8")
    (activity,) = parse_activities(str(path))
    assert activity.is_active is False
    assert activity.is_temporary is True
