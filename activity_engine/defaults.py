"""Default activity catalog used to seed an empty store."""

from __future__ import annotations

from activity_engine.frequency import frequency_to_curve
from activity_engine.schema import Activity, TargetFrequency, default_hour_tiers

CATEGORIES = (
    "Projects",
    "Writing",
    "Reading",
    "Entertainment",
    "RPG",
    "Skills",
    "Habits",
    "Challenges",
    "Chores",
)

# name, category, mental, physical, frequency, cooldown hours, notes
DEFAULT_ACTIVITIES = [
    ("Spacetime Watch", "Projects", 3, 0, TargetFrequency("freeform"), None, "Deep focus coding"),
    ("Virtualism essay", "Writing", 3, 0, TargetFrequency("per_period", 3, 7), None, ""),
    ("Fiction writing (Weave)", "Writing", 3, 0, TargetFrequency("per_period", 2, 7), None, "Short story"),
    ("Philosophy reading", "Reading", 3, 0, TargetFrequency("daily"), None, ""),
    ("Min Kamp (Knausgård)", "Reading", 1, 0, TargetFrequency("daily"), None, "All 6 volumes"),
    ("Film exploration", "Entertainment", 1, 0, TargetFrequency("per_period", 2, 7), None, "See film sequence list"),
    ("Weave RPG design", "RPG", 3, 0, TargetFrequency("per_period", 2, 7), None, ""),
    ("Piano practice", "Skills", 2, 0, TargetFrequency("daily"), None, ""),
    ("Sketching", "Skills", 2, 0, TargetFrequency("daily"), None, ""),
    ("Whittling", "Skills", 1, 2, TargetFrequency("per_period", 3, 7), None, ""),
    (
        "Talking practice (AI)",
        "Skills",
        2,
        0,
        TargetFrequency("per_period", 3, 7),
        None,
        "Philosophy monologues, improv, storytelling",
    ),
    ("Meditation", "Habits", 1, 0, TargetFrequency("daily"), None, ""),
    ("Walking + audiobook", "Habits", 0, 2, TargetFrequency("daily"), None, "10k steps target"),
    ("Running", "Challenges", 0, 3, TargetFrequency("per_period", 3, 7), 48, "C25K?"),
    ("Sauna", "Challenges", 0, 1, TargetFrequency("per_period", 3, 7), 24, "Find local options"),
    ("Astronomy club", "Challenges", 1, 0, TargetFrequency("freeform"), 168, "Research local clubs"),
    (
        "Electronic music",
        "Challenges",
        3,
        0,
        TargetFrequency("per_period", 2, 7),
        None,
        "Sonic Pi, TidalCycles, spatial audio",
    ),
    ("Vacuuming", "Chores", 0, 1, TargetFrequency("per_period", 1, 7), 168, ""),
]


def seed_default_activities(now_ms: int) -> list[Activity]:
    """Build the default catalog with curves derived from each frequency."""

    activities = []
    for index, (name, category, mental, physical, frequency, cooldown, notes) in enumerate(DEFAULT_ACTIVITIES, start=1):
        activities.append(
            Activity(
                id=f"default-{index}",
                name=name,
                category=category,
                mental_energy_cost=mental,
                physical_energy_cost=physical,
                target_frequency=frequency,
                cooldown_hours=cooldown,
                priority_curve=frequency_to_curve(frequency, cooldown),
                hour_tiers=default_hour_tiers(),
                notes=notes,
                created_at=now_ms,
            )
        )
    return activities
