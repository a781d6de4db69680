"""Streamlit demo UI for activity-engine."""

from __future__ import annotations

import tempfile
import time
from datetime import datetime
from pathlib import Path
from typing import Any

from activity_engine.adapters import csv_adapter, json_adapter
from activity_engine.board import build_board
from activity_engine.formatting import energy_dots, format_time_remaining, format_time_since
from activity_engine.schema import MAX_ENERGY, PrioritizedActivity

DEMO_ACTIVITIES = "examples/sample_activities.json"
DEMO_SESSIONS = "examples/sample_sessions.csv"

SECTION_TITLES = {
    "available": "Available now",
    "cooldown": "On cooldown",
    "wrong_time": "Wrong time of day",
    "too_tired": "Too tired",
}


def _save_upload(uploaded_file) -> str:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        return handle.name


def _parse_sessions_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse_sessions(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _row(item: PrioritizedActivity) -> dict[str, Any]:
    row = {
        "activity": item.activity.name,
        "category": item.activity.category,
        "score": round(item.score, 4),
        "mental": energy_dots(item.activity.mental_energy_cost),
        "physical": energy_dots(item.activity.physical_energy_cost),
        "last done": format_time_since(item.time_since_last_ms),
        "sessions": item.session_count,
        "recent": item.recent_frequency,
    }
    if item.cooldown_remaining_ms is not None:
        row["ready in"] = format_time_remaining(item.cooldown_remaining_ms)
    return row


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Activity Engine Demo", layout="wide")
    st.title("Activity Engine — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        activities_file = st.file_uploader("Upload activities", type=["json"])
        sessions_file = st.file_uploader("Upload sessions", type=["csv", "json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        mental = st.slider("Mental energy", min_value=0, max_value=MAX_ENERGY, value=2)
        physical = st.slider("Physical energy", min_value=0, max_value=MAX_ENERGY, value=1)
        now_ms = int(time.time() * 1000)
        hour = st.slider("Current hour", min_value=0, max_value=23, value=datetime.now().hour)
        bucket_model = st.selectbox("Bucket model", options=["three", "four"], index=0)

    try:
        if use_demo:
            activities = json_adapter.parse_activities(DEMO_ACTIVITIES)
            sessions = csv_adapter.parse(DEMO_SESSIONS)
        elif activities_file is not None:
            activities = json_adapter.parse_activities(_save_upload(activities_file))
            sessions = _parse_sessions_from_path(_save_upload(sessions_file)) if sessions_file else []
        else:
            st.info("Upload an activities file or enable 'Load demo dataset'.")
            return

        board = build_board(activities, sessions, mental, physical, hour, now_ms, bucket_model=bucket_model)
    except ValueError as exc:
        st.error(f"Input error: {exc}")
        return

    for name, title in SECTION_TITLES.items():
        if name == "cooldown" and bucket_model != "four":
            continue
        entries = board.result.section(name)
        st.subheader(f"{title} ({len(entries)})")
        if entries:
            st.table([_row(item) for item in entries])

    if board.paused:
        st.subheader(f"Paused ({len(board.paused)})")
        st.table(
            [
                {"activity": a.name, "resumes in": format_time_remaining(a.paused_until - now_ms)}
                for a in board.paused
            ]
        )


if __name__ == "__main__":
    main()
