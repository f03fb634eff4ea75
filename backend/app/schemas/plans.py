"""
Training Plan Schemas

Pydantic models for plan generation requests and responses.
"""

from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict, List, Optional

from app.features.plans import AthleteIntake, Priority
from app.features.results import StationKey, format_duration


def _drop_unknown_times(v: Dict[StationKey, int]) -> Dict[StationKey, int]:
    """0 means "not entered" on the form; keep only real times."""
    return {key: seconds for key, seconds in v.items() if seconds and seconds > 0}


# === Request Models ===

class PriorityRequest(BaseModel):
    """Station times to rank."""
    station_times: Dict[StationKey, int] = {}

    @field_validator("station_times")
    @classmethod
    def drop_unknown(cls, v):
        return _drop_unknown_times(v)


class PlanRequest(BaseModel):
    """Athlete intake form."""

    # Race
    race_location: str = Field(..., min_length=1)
    race_date: date
    race_division: str = "womens-open"
    age_group: Optional[str] = None

    # Performance, seconds
    current_time_s: int = Field(default=0, ge=0)
    current_5k_s: int = Field(default=0, ge=0)
    target_time_s: int = Field(default=0, ge=0)
    target_5k_s: int = Field(default=0, ge=0)
    station_times: Dict[StationKey, int] = {}

    # Body composition
    current_weight_kg: Optional[float] = Field(default=None, gt=0)
    current_body_fat: Optional[float] = Field(default=None, ge=0, le=100)
    target_weight_kg: Optional[float] = Field(default=None, gt=0)
    target_body_fat: Optional[float] = Field(default=None, ge=0, le=100)

    # Schedule
    run_days: int = Field(default=3, ge=0, le=7)
    strength_days: int = Field(default=2, ge=0, le=7)
    gym_days: int = Field(default=1, ge=0, le=7)
    equipment: List[str] = []

    @field_validator("station_times")
    @classmethod
    def drop_unknown(cls, v):
        return _drop_unknown_times(v)

    @model_validator(mode="after")
    def check_week(self):
        if self.run_days + self.strength_days + self.gym_days > 7:
            raise ValueError("Training days per week cannot exceed 7")
        return self

    def to_intake(self) -> AthleteIntake:
        return AthleteIntake(
            race_location=self.race_location,
            race_date=self.race_date,
            race_division=self.race_division,
            age_group=self.age_group,
            current_time_s=self.current_time_s,
            current_5k_s=self.current_5k_s,
            target_time_s=self.target_time_s,
            target_5k_s=self.target_5k_s,
            station_times=dict(self.station_times),
            current_weight_kg=self.current_weight_kg,
            current_body_fat=self.current_body_fat,
            target_weight_kg=self.target_weight_kg,
            target_body_fat=self.target_body_fat,
            run_days=self.run_days,
            strength_days=self.strength_days,
            gym_days=self.gym_days,
            equipment=list(self.equipment),
        )


# === Response Models ===

class PriorityItem(BaseModel):
    """A station ranked by potential savings."""
    station: StationKey
    name: str
    current: str
    target: str
    savings: str
    savings_s: int

    @classmethod
    def from_priority(cls, p: Priority) -> "PriorityItem":
        return cls(
            station=p.key,
            name=p.name,
            current=format_duration(p.current_s),
            target=format_duration(p.target_s),
            savings=format_duration(p.savings_s),
            savings_s=p.savings_s,
        )


class PriorityResponse(BaseModel):
    priorities: List[PriorityItem] = []


class PlanResponse(BaseModel):
    """Stored training plan."""
    id: str
    weeks: int
    html: Optional[str] = None
    model_name: Optional[str] = None
    intake: dict
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True, "protected_namespaces": ()}
