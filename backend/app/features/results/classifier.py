"""Keyword classification of split labels into Hyrox stations.

Labels vary across sources ("SkiErg Out", "1000m Ski Erg", "Burpee Broad
Jump Out"), so matching is done on lower-cased substrings. Rules are
evaluated in priority order and the first match wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from .models import RawRow, StationKey

IN_MARKER_RE = re.compile(r"\bin\b")


@dataclass(frozen=True)
class StationRule:
    """A keyword test mapping a lower-cased label to a station."""

    key: StationKey
    matches: Callable[[str], bool]


STATION_RULES: tuple[StationRule, ...] = (
    StationRule(StationKey.SKI_ERG, lambda s: "ski" in s and "erg" in s),
    StationRule(StationKey.SLED_PUSH, lambda s: "sled" in s and "push" in s),
    StationRule(StationKey.SLED_PULL, lambda s: "sled" in s and "pull" in s),
    StationRule(
        StationKey.BURPEE,
        lambda s: "burpee" in s or ("broad" in s and "jump" in s),
    ),
    StationRule(
        StationKey.ROW,
        lambda s: "row" in s and "rox" not in s and "zone" not in s,
    ),
    StationRule(
        StationKey.FARMERS,
        lambda s: "farmers" in s or ("carry" in s and "sandbag" not in s),
    ),
    StationRule(StationKey.LUNGES, lambda s: "lunge" in s or "sandbag" in s),
    StationRule(StationKey.WALL_BALLS, lambda s: "wall" in s and "ball" in s),
)


def _is_total(label: str, is_last: bool) -> bool:
    return "total" in label or "finish" in label or ("time" in label and is_last)


def classify(row: RawRow, is_last: bool = False) -> StationKey:
    """Map a row's label to a StationKey.

    Args:
        row: Parsed split row.
        is_last: Whether this is the final row of the table; a bare
            "time" label only means total time in that position.
    """
    label = row.label.lower().strip()
    for rule in STATION_RULES:
        if rule.matches(label):
            return rule.key
    if _is_total(label, is_last):
        return StationKey.TOTAL
    return StationKey.UNCLASSIFIED


def has_in_marker(label: str) -> bool:
    """True if the label marks a station entry ("Wall Balls In")."""
    return bool(IN_MARKER_RE.search(label.lower()))


def counts_toward_station(row: RawRow, key: StationKey, duration: int) -> bool:
    """Whether a classified row's duration is the station's work time.

    Sources pair "In"/"Out" rows per station and only the "Out" row's diff
    is the station time. Wall balls are often logged without a marker, so
    an unmarked wall balls row with a duration also counts.
    """
    if not key.is_station:
        return False
    label = row.label.lower()
    if "out" in label:
        return True
    if key is StationKey.WALL_BALLS:
        return not has_in_marker(label) and duration > 0
    return False
