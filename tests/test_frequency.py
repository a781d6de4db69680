from activity_engine.frequency import decay_constant_ms, expected_interval_ms, frequency_to_curve
from activity_engine.schema import DAY_MS, WEEK_MS, CurvePoint, TargetFrequency


def test_frequency_to_curve_basic_types():
    assert frequency_to_curve(TargetFrequency("daily")) == [CurvePoint(0, 0), CurvePoint(1, 1)]
    assert frequency_to_curve(TargetFrequency("weekly")) == [CurvePoint(0, 0), CurvePoint(7, 1)]
    assert frequency_to_curve(TargetFrequency("freeform")) == [
        CurvePoint(0, 0),
        CurvePoint(14, 0.5),
        CurvePoint(30, 1),
    ]


def test_per_period_curve_rounds_interval():
    assert frequency_to_curve(TargetFrequency("per_period", 2, 7))[1] == CurvePoint(3.5, 1)
    assert frequency_to_curve(TargetFrequency("per_period", 3, 7))[1] == CurvePoint(2.3, 1)
    assert frequency_to_curve(TargetFrequency("per_period"))[1] == CurvePoint(7, 1)


def test_cooldown_shifts_every_point():
    assert frequency_to_curve(TargetFrequency("daily"), cooldown_hours=48) == [CurvePoint(2.0, 0), CurvePoint(3.0, 1)]
    shifted = frequency_to_curve(TargetFrequency("per_period", 2, 7), cooldown_hours=48)
    assert [p.days for p in shifted] == [2.0, 5.5]


def test_unknown_type_gets_freeform_curve():
    assert frequency_to_curve(TargetFrequency("fortnightly")) == frequency_to_curve(TargetFrequency("freeform"))


def test_expected_interval_ms():
    assert expected_interval_ms(TargetFrequency("daily")) == DAY_MS
    assert expected_interval_ms(TargetFrequency("weekly")) == WEEK_MS
    assert expected_interval_ms(TargetFrequency("per_period", 2, 7)) == 3.5 * DAY_MS
    assert expected_interval_ms(TargetFrequency("per_period", None, 7)) == WEEK_MS
    assert expected_interval_ms(TargetFrequency("freeform")) is None
    assert expected_interval_ms(TargetFrequency("mystery")) == WEEK_MS


def test_decay_constant_ms():
    assert decay_constant_ms(TargetFrequency("daily")) == DAY_MS * 0.8
    assert decay_constant_ms(TargetFrequency("freeform")) == WEEK_MS * 0.8
