"""
Result Parsing Schemas

Pydantic models for race result parsing requests and responses.
"""

from pydantic import BaseModel, Field
from typing import Dict, Optional

from app.features.results import RaceResult, SourceKind, StationKey, format_duration


# === Request Models ===

class HyResultRequest(BaseModel):
    """Parse a HyResult result page by URL."""
    url: str = Field(..., description="https://www.hyresult.com/result/...")


class ParseRequest(BaseModel):
    """Parse an already-fetched result document."""
    content: str
    source_kind: SourceKind = SourceKind.HTML


# === Response Models ===

class RaceResultResponse(BaseModel):
    """Parsed station times.

    Stations missing from station_times were not found in the source.
    """
    success: bool = True
    station_times: Dict[StationKey, int] = {}
    station_times_formatted: Dict[StationKey, str] = {}
    total_time: Optional[int] = None
    total_time_formatted: str = "N/A"
    missing_stations: list[StationKey] = []

    @classmethod
    def from_result(cls, result: RaceResult) -> "RaceResultResponse":
        return cls(
            station_times=dict(result.station_times),
            station_times_formatted={
                key: format_duration(seconds)
                for key, seconds in result.station_times.items()
            },
            total_time=result.total_time,
            total_time_formatted=format_duration(result.total_time),
            missing_stations=[
                key for key in StationKey.stations()
                if key not in result.station_times
            ],
        )
