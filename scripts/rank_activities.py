"""Rank activities from JSON/CSV records and print the board as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from activity_engine.adapters import csv_adapter, json_adapter
from activity_engine.board import build_board
from activity_engine.config import BUCKET_MODELS, settings


def _load_sessions(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse_sessions(str(path))
    raise ValueError("Unsupported sessions format, expected .csv or .json")


def main() -> None:
    parser = argparse.ArgumentParser(description="Rank activities for the current energy and hour")
    parser.add_argument("--activities", required=True, help="Path to activities JSON file")
    parser.add_argument("--sessions", help="Path to sessions CSV/JSON file")
    parser.add_argument("--mental", type=int, required=True, help="Current mental energy (0-3)")
    parser.add_argument("--physical", type=int, required=True, help="Current physical energy (0-3)")
    parser.add_argument("--now-ms", type=int, help="Current time in epoch ms (defaults to the system clock)")
    parser.add_argument("--hour", type=int, help="Current hour (defaults to the local hour of --now-ms)")
    parser.add_argument("--bucket-model", choices=BUCKET_MODELS, default=None)
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    now_ms = args.now_ms if args.now_ms is not None else int(time.time() * 1000)
    hour = args.hour if args.hour is not None else datetime.fromtimestamp(now_ms / 1000).hour

    activities = json_adapter.parse_activities(args.activities)
    sessions = _load_sessions(Path(args.sessions)) if args.sessions else []

    board = build_board(
        activities,
        sessions,
        args.mental,
        args.physical,
        hour,
        now_ms,
        bucket_model=args.bucket_model,
    )
    print(json.dumps(board.as_dict(now_ms), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
