"""CSV adapter for session records."""

from __future__ import annotations

import csv
import logging

from activity_engine.schema import MAX_ENERGY, Session, timestamp_to_ms

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("activity_id", "started_at")


def _optional_int(row: dict, field_name: str, row_number: int) -> int | None:
    raw = row.get(field_name)
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: invalid {field_name}") from exc


def _cost(row: dict, field_name: str, row_number: int) -> int:
    cost = _optional_int(row, field_name, row_number) or 0
    if not 0 <= cost <= MAX_ENERGY:
        raise ValueError(f"Row {row_number}: {field_name} must be between 0 and {MAX_ENERGY}")
    return cost


def _parse_row(row: dict, row_number: int) -> Session:
    missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        started_at = timestamp_to_ms(row["started_at"])
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed started_at") from exc

    note = (row.get("note") or "").strip()

    return Session(
        id=(row.get("id") or "").strip() or f"session-{row_number}",
        activity_id=row["activity_id"].strip(),
        started_at=started_at,
        mental_energy_cost_at_time=_cost(row, "mental_energy_cost_at_time", row_number),
        physical_energy_cost_at_time=_cost(row, "physical_energy_cost_at_time", row_number),
        note=note or None,
        duration_ms=_optional_int(row, "duration_ms", row_number),
    )


def parse(file_path: str) -> list[Session]:
    """Parse CSV file into a list of sessions."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        sessions: list[Session] = []
        for row_number, row in enumerate(reader, start=2):
            sessions.append(_parse_row(row, row_number))

    logger.info("Loaded %d sessions from %s", len(sessions), file_path)
    return sessions
