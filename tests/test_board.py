from datetime import date

import pytest

from activity_engine.board import build_board, is_paused, pause_until
from activity_engine.schema import WEEK_MS, Activity

NOW = 1_760_000_000_000


def make_activity(activity_id, **kwargs):
    return Activity(activity_id, activity_id.title(), "Habits", 0, 0, **kwargs)


def test_pause_until_and_is_paused():
    until = pause_until(NOW, 2)
    assert until == NOW + 2 * WEEK_MS
    activity = make_activity("a", paused_until=until)
    assert is_paused(activity, NOW)
    assert not is_paused(activity, until)
    assert not is_paused(make_activity("b"), NOW)
    with pytest.raises(ValueError):
        pause_until(NOW, 0)


def test_build_board_sets_aside_paused_and_drops_archived():
    activities = [
        make_activity("active"),
        make_activity("paused", paused_until=NOW + WEEK_MS),
        make_activity("resumed", paused_until=NOW - 1),
        make_activity("archived", is_active=False),
    ]
    board = build_board(activities, [], 0, 0, 10, NOW, today=date(2025, 10, 9))

    assert sorted(item.activity.id for item in board.result.available) == ["active", "resumed"]
    assert [activity.id for activity in board.paused] == ["paused"]

    payload = board.as_dict(NOW)
    assert payload["paused"] == [
        {"id": "paused", "name": "Paused", "paused_until": NOW + WEEK_MS, "resumes_in": "7d"}
    ]
    assert "cooldown" not in payload
