"""
Centralized configuration for the activity engine.

Loads tunables from the environment (and an optional .env at the project
root). Every value has a default, so nothing is required to run.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_ENV_PATH)

BUCKET_MODELS = ("three", "four")


class Settings(BaseModel):
    """Scoring tunables loaded from ACTIVITY_ENGINE_* environment variables."""

    # "three" is canonical; "four" adds the legacy cooldown section
    BUCKET_MODEL: str = "three"

    # Scores closer than this are ordered by the daily tiebreaker
    TIE_EPSILON: float = 0.001

    # Multiplier per unit of unused energy
    ENERGY_MATCH_BASE: float = 0.75

    # Applied at "possible" hours when the activity has preferred hours
    POSSIBLE_HOUR_DAMPENING: float = 0.5

    # Recency weighting for the recent-frequency estimate
    FREQUENCY_HALF_LIFE_DAYS: float = 10.0

    LOG_LEVEL: str = "INFO"

    @field_validator("BUCKET_MODEL", mode="before")
    @classmethod
    def parse_bucket_model(cls, v: str) -> str:
        value = str(v).strip().lower()
        if value not in BUCKET_MODELS:
            raise ValueError(f"BUCKET_MODEL must be one of {BUCKET_MODELS}, got '{v}'")
        return value

    @field_validator("FREQUENCY_HALF_LIFE_DAYS")
    @classmethod
    def positive_half_life(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("FREQUENCY_HALF_LIFE_DAYS must be positive")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        return str(v).strip().upper()


def _load_settings() -> Settings:
    """Load settings from the environment."""
    return Settings(
        BUCKET_MODEL=os.getenv("ACTIVITY_ENGINE_BUCKET_MODEL", "three"),
        TIE_EPSILON=os.getenv("ACTIVITY_ENGINE_TIE_EPSILON", "0.001"),
        ENERGY_MATCH_BASE=os.getenv("ACTIVITY_ENGINE_ENERGY_MATCH_BASE", "0.75"),
        POSSIBLE_HOUR_DAMPENING=os.getenv("ACTIVITY_ENGINE_POSSIBLE_HOUR_DAMPENING", "0.5"),
        FREQUENCY_HALF_LIFE_DAYS=os.getenv("ACTIVITY_ENGINE_FREQUENCY_HALF_LIFE_DAYS", "10"),
        LOG_LEVEL=os.getenv("ACTIVITY_ENGINE_LOG_LEVEL", "INFO"),
    )


# Singleton, imported as:
#   from activity_engine.config import settings
settings = _load_settings()
