"""Demo script for activity-engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from activity_engine.adapters.csv_adapter import parse
from activity_engine.adapters.json_adapter import parse_activities
from activity_engine.board import build_board
from activity_engine.formatting import format_time_since

NOW_MS = 1_760_000_000_000


def main() -> None:
    activities = parse_activities("examples/sample_activities.json")
    sessions = parse("examples/sample_sessions.csv")
    board = build_board(activities, sessions, mental_energy=2, physical_energy=1, current_hour=10, now_ms=NOW_MS)
    for item in board.result.available:
        since = format_time_since(item.time_since_last_ms)
        print(f"{item.score:6.3f}  {item.activity.name:<24} {since:<12} {item.recent_frequency}")
    print("Wrong time:", [item.activity.name for item in board.result.wrong_time])
    print("Too tired:", [item.activity.name for item in board.result.too_tired])
    print("Paused:", [activity.name for activity in board.paused])


if __name__ == "__main__":
    main()
