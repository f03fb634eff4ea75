"""Station targets and training priority ranking."""

from __future__ import annotations

from typing import Mapping

from app.features.results.models import StationKey

from .models import Priority

# Target station times in seconds
STATION_TARGETS: dict[StationKey, int] = {
    StationKey.SKI_ERG: 285,  # 4:45
    StationKey.SLED_PUSH: 150,  # 2:30
    StationKey.SLED_PULL: 210,  # 3:30
    StationKey.BURPEE: 300,  # 5:00
    StationKey.ROW: 285,  # 4:45
    StationKey.FARMERS: 150,  # 2:30
    StationKey.LUNGES: 270,  # 4:30
    StationKey.WALL_BALLS: 210,  # 3:30
}

DEFAULT_TARGET_S = 300

STATION_NAMES: dict[StationKey, str] = {
    StationKey.SKI_ERG: "SkiErg",
    StationKey.SLED_PUSH: "Sled Push",
    StationKey.SLED_PULL: "Sled Pull",
    StationKey.BURPEE: "Burpee Broad Jumps",
    StationKey.ROW: "Row",
    StationKey.FARMERS: "Farmers Carry",
    StationKey.LUNGES: "Sandbag Lunges",
    StationKey.WALL_BALLS: "Wall Balls",
}

# Labels used in the prompt's station list
STATION_DISTANCE_LABELS: dict[StationKey, str] = {
    StationKey.SKI_ERG: "1000m SkiErg",
    StationKey.SLED_PUSH: "50m Sled Push",
    StationKey.SLED_PULL: "50m Sled Pull",
    StationKey.BURPEE: "80m Burpee Broad Jumps",
    StationKey.ROW: "1000m Row",
    StationKey.FARMERS: "200m Farmers Carry",
    StationKey.LUNGES: "100m Sandbag Lunges",
    StationKey.WALL_BALLS: "100 Wall Balls",
}


def station_target(key: StationKey) -> int:
    return STATION_TARGETS.get(key, DEFAULT_TARGET_S)


def calculate_priorities(station_times: Mapping[StationKey, int]) -> list[Priority]:
    """Rank stations slower than target by potential savings (largest first).

    Unknown stations (missing or 0) are skipped.
    """
    priorities = []
    for key in StationKey.stations():
        current = station_times.get(key) or 0
        target = station_target(key)
        if current > target:
            priorities.append(
                Priority(
                    key=key,
                    name=STATION_NAMES[key],
                    current_s=current,
                    target_s=target,
                )
            )

    priorities.sort(key=lambda p: p.savings_s, reverse=True)
    return priorities
