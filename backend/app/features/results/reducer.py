"""Fold classified split rows into per-station durations."""

from __future__ import annotations

import logging
from typing import Sequence

from .classifier import classify, counts_toward_station
from .models import RaceResult, RawRow, StationKey
from .time_codec import parse_duration

logger = logging.getLogger(__name__)

# Stations some sources log without an "Out" marker
REPAIR_STATIONS: tuple[StationKey, ...] = (
    StationKey.SKI_ERG,
    StationKey.SLED_PUSH,
    StationKey.SLED_PULL,
)


def reduce_to_result(
    rows: Sequence[RawRow],
    repair_stations: Sequence[StationKey] = REPAIR_STATIONS,
) -> RaceResult:
    """Build a RaceResult from rows in source order.

    Station duration is the row's diff; when the diff is missing it is
    derived from the cumulative time of the previous row. Later rows
    overwrite earlier ones for the same station.

    Args:
        rows: Rows from extract_raw_rows.
        repair_stations: Stations rescanned without the "out" rule when
            the first pass did not find them.
    """
    result = RaceResult()
    previous_cumulative = 0
    last_index = len(rows) - 1

    for i, row in enumerate(rows):
        diff_s = parse_duration(row.diff)
        cumulative_s = parse_duration(row.cumulative_time)

        duration = diff_s
        if diff_s == 0 and cumulative_s > previous_cumulative:
            duration = cumulative_s - previous_cumulative
        previous_cumulative = cumulative_s

        key = classify(row, is_last=i == last_index)
        if key is StationKey.TOTAL:
            if cumulative_s > 0:
                result.total_time = cumulative_s
        elif duration > 0 and counts_toward_station(row, key, duration):
            result.station_times[key] = duration

    missing = [k for k in repair_stations if k not in result.station_times]
    if missing:
        _repair(result, rows, missing)

    logger.debug(
        f"Reduced {len(rows)} rows to {len(result.station_times)} stations, "
        f"total={result.total_time}"
    )
    return result


def _repair(
    result: RaceResult,
    rows: Sequence[RawRow],
    missing: Sequence[StationKey],
) -> None:
    """Fill missing stations from any matching row with a nonzero diff."""
    last_index = len(rows) - 1
    for i, row in enumerate(rows):
        diff_s = parse_duration(row.diff)
        if diff_s == 0:
            continue
        key = classify(row, is_last=i == last_index)
        if key in missing and key not in result.station_times:
            result.station_times[key] = diff_s
            logger.debug(f"Repair pass filled {key.value} from '{row.label}'")
