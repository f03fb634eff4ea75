"""Data models for training plan generation (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from app.features.results.models import StationKey


@dataclass
class RaceWeights:
    """Division race weights in kg."""

    sled_push: int  # including sled
    sled_pull: int  # including sled
    farmers_carry: int  # per hand
    sandbag_lunges: int
    wall_balls: int


@dataclass
class Priority:
    """A station ranked by potential time savings."""

    key: StationKey
    name: str  # "Wall Balls"
    current_s: int
    target_s: int

    @property
    def savings_s(self) -> int:
        return self.current_s - self.target_s


@dataclass
class TrainingPhases:
    """Week boundaries of the periodized plan (1-based, inclusive)."""

    foundation_end: int
    build_start: int
    build_end: int
    intensity_start: int
    intensity_end: int
    peak_start: int
    peak_end: int
    taper_week: int


@dataclass
class AthleteIntake:
    """Everything the athlete entered on the intake form."""

    # Race
    race_location: str
    race_date: date
    race_division: str  # "mens-open"
    age_group: str | None = None

    # Performance (seconds; 0 = not provided)
    current_time_s: int = 0
    current_5k_s: int = 0
    target_time_s: int = 0
    target_5k_s: int = 0
    station_times: dict[StationKey, int] = field(default_factory=dict)

    # Body composition
    current_weight_kg: float | None = None
    current_body_fat: float | None = None
    target_weight_kg: float | None = None
    target_body_fat: float | None = None

    # Schedule
    run_days: int = 3
    strength_days: int = 2
    gym_days: int = 1
    equipment: list[str] = field(default_factory=list)

    @property
    def rest_days(self) -> int:
        return 7 - self.run_days - self.strength_days - self.gym_days

    @property
    def time_to_find_s(self) -> int:
        return self.current_time_s - self.target_time_s
