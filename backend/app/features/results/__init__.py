"""Results feature module: race result extraction and normalization."""

from .models import RawRow, RaceResult, StationKey
from .time_codec import parse_duration, format_duration
from .extractor import SourceKind, extract_raw_rows, split_csv_line
from .classifier import classify, counts_toward_station
from .reducer import reduce_to_result, REPAIR_STATIONS
from .fetcher import FetchError, HyResultFetcher, InvalidResultUrlError
from .service import ResultParserService, parse_result

__all__ = [
    "RawRow",
    "RaceResult",
    "StationKey",
    "parse_duration",
    "format_duration",
    "SourceKind",
    "extract_raw_rows",
    "split_csv_line",
    "classify",
    "counts_toward_station",
    "reduce_to_result",
    "REPAIR_STATIONS",
    "FetchError",
    "HyResultFetcher",
    "InvalidResultUrlError",
    "ResultParserService",
    "parse_result",
]
