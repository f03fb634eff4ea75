"""Data models for parsed race results (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class StationKey(str, Enum):
    """Fixed set of Hyrox stations plus classifier sentinels."""

    SKI_ERG = "skiErg"
    SLED_PUSH = "sledPush"
    SLED_PULL = "sledPull"
    BURPEE = "burpee"
    ROW = "row"
    FARMERS = "farmers"
    LUNGES = "lunges"
    WALL_BALLS = "wallBalls"

    TOTAL = "total"
    UNCLASSIFIED = "unclassified"

    @classmethod
    def stations(cls) -> list[StationKey]:
        """The eight scored stations in race order."""
        return [
            cls.SKI_ERG,
            cls.SLED_PUSH,
            cls.SLED_PULL,
            cls.BURPEE,
            cls.ROW,
            cls.FARMERS,
            cls.LUNGES,
            cls.WALL_BALLS,
        ]

    @property
    def is_station(self) -> bool:
        return self not in (StationKey.TOTAL, StationKey.UNCLASSIFIED)


@dataclass(frozen=True)
class RawRow:
    """One parsed line of a result table.

    Duration fields keep the source text ("0:04:45", "04:45", "285");
    conversion happens in time_codec.
    """

    label: str  # "SkiErg Out"
    time_of_day: str | None  # "10:04:45", not used downstream
    cumulative_time: str  # "0:04:45"
    diff: str  # "0:04:45", may be empty


@dataclass
class RaceResult:
    """Canonical station times for one race.

    A missing key in station_times means "unknown", not zero.
    """

    station_times: dict[StationKey, int] = field(default_factory=dict)
    total_time: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.station_times and self.total_time is None
