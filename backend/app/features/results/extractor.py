"""Tabular extraction of split rows from result pages and CSV exports.

HTML sources are tried against a chain of strategies (table markup,
markdown-style pipe table, embedded JSON state); the first strategy that
yields rows wins. CSV exports have their own parser.
"""

from __future__ import annotations

import json
import logging
import math
import re
from enum import Enum
from typing import Any, Callable, Sequence

from bs4 import BeautifulSoup

from .models import RawRow

logger = logging.getLogger(__name__)

Strategy = Callable[[str], list[RawRow]]

TAG_RE = re.compile(r"<[^>]+>")

# | SkiErg Out | 10:04:45 | 0:04:45 | 0:04:45 |
MARKDOWN_ROW_RE = re.compile(
    r"\|\s*([^|]+?)\s*\|\s*(\d{2}:\d{2}:\d{2})\s*\|\s*([\d:]+)\s*\|\s*([\d:]+)\s*\|"
)
MARKDOWN_HEADER_TOKENS = ("split", "time of day")

INITIAL_STATE_RE = re.compile(r"window\.__INITIAL_STATE__\s*=\s*")

HTML_HEADER_LABEL = "Split"
MIN_TABLE_CELLS = 4

# Key aliases for split objects inside embedded JSON state
JSON_LABEL_KEYS = ("split", "name", "label", "station")
JSON_TIME_OF_DAY_KEYS = ("timeOfDay", "time_of_day")
JSON_CUMULATIVE_KEYS = ("time", "cumulativeTime", "cumulative_time", "cumulative")
JSON_DIFF_KEYS = ("diff", "duration")

CSV_LABEL_COLUMNS = ("split", "station")
CSV_DIFF_COLUMNS = ("diff", "time")
CSV_TIME_COLUMN = "time"


class SourceKind(str, Enum):
    """Kind of source document handed to the extractor."""

    HTML = "html"
    CSV = "csv"


def strip_markup(text: str) -> str:
    """Remove HTML tags and surrounding whitespace."""
    return TAG_RE.sub("", text).strip()


# =============================================================================
# HTML strategies
# =============================================================================

def extract_html_table(html: str) -> list[RawRow]:
    """Rows of the first <table>: [label, time of day, cumulative, diff]."""
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table")
    if table is None:
        return []

    rows: list[RawRow] = []
    for tr in table.find_all("tr"):
        cells = [" ".join(td.get_text().split()) for td in tr.find_all("td")]
        if len(cells) < MIN_TABLE_CELLS or cells[0] == HTML_HEADER_LABEL:
            continue
        rows.append(
            RawRow(
                label=cells[0],
                time_of_day=cells[1] or None,
                cumulative_time=cells[2],
                diff=cells[3],
            )
        )
    return rows


def extract_markdown_table(text: str) -> list[RawRow]:
    """Rows of a pipe-delimited table with an HH:MM:SS time-of-day column."""
    rows: list[RawRow] = []
    for match in MARKDOWN_ROW_RE.finditer(text):
        label = strip_markup(match.group(1))
        lowered = label.lower()
        if any(token in lowered for token in MARKDOWN_HEADER_TOKENS):
            continue
        rows.append(
            RawRow(
                label=label,
                time_of_day=match.group(2),
                cumulative_time=match.group(3),
                diff=match.group(4),
            )
        )
    return rows


def extract_embedded_json(html: str) -> list[RawRow]:
    """Rows from a `splits` list in `window.__INITIAL_STATE__`."""
    match = INITIAL_STATE_RE.search(html)
    if not match:
        return []

    # RecursionError: state nested deeper than the decoder or the search can go
    try:
        state, _ = json.JSONDecoder().raw_decode(html, match.end())
        splits = _find_splits(state)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Embedded state is not usable JSON: {e}")
        return []

    if not splits:
        return []

    rows: list[RawRow] = []
    for item in splits:
        label = _first_value(item, JSON_LABEL_KEYS)
        if not label:
            continue
        rows.append(
            RawRow(
                label=strip_markup(label),
                time_of_day=_first_value(item, JSON_TIME_OF_DAY_KEYS) or None,
                cumulative_time=_first_value(item, JSON_CUMULATIVE_KEYS),
                diff=_first_value(item, JSON_DIFF_KEYS),
            )
        )
    return rows


def _find_splits(node: Any) -> list[dict] | None:
    """Depth-first search for the first `splits` list of objects."""
    if isinstance(node, dict):
        value = node.get("splits")
        if isinstance(value, list) and value and all(isinstance(v, dict) for v in value):
            return value
        children = node.values()
    elif isinstance(node, list):
        children = node
    else:
        return None

    for child in children:
        found = _find_splits(child)
        if found:
            return found
    return None


def _first_value(item: dict, keys: Sequence[str]) -> str:
    """First non-empty value among keys, as text (numbers are seconds)."""
    for key in keys:
        value = item.get(key)
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            continue
        if isinstance(value, (int, float)):
            # json accepts NaN and Infinity
            if not math.isfinite(value):
                continue
            return str(int(value))
        return str(value).strip()
    return ""


HTML_STRATEGIES: tuple[Strategy, ...] = (
    extract_html_table,
    extract_markdown_table,
    extract_embedded_json,
)


# =============================================================================
# CSV
# =============================================================================

def split_csv_line(line: str) -> list[str]:
    """Split a CSV line on commas outside double quotes.

    Quotes toggle the "inside field" state and are dropped; an unbalanced
    quote swallows the rest of the line into the current field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def extract_csv(csv_text: str) -> list[RawRow]:
    """Rows of a CSV export with a Split/Station header column."""
    lines = [line for line in csv_text.splitlines() if line.strip()]
    if not lines:
        return []

    header = {
        name.lower().strip(): index
        for index, name in enumerate(split_csv_line(lines[0]))
    }
    label_idx = _column_index(header, CSV_LABEL_COLUMNS)
    if label_idx is None:
        logger.warning("CSV has no Split/Station column")
        return []
    diff_idx = _column_index(header, CSV_DIFF_COLUMNS)
    time_idx = header.get(CSV_TIME_COLUMN)

    rows: list[RawRow] = []
    for line in lines[1:]:
        fields = split_csv_line(line)
        rows.append(
            RawRow(
                label=strip_markup(_field(fields, label_idx)),
                time_of_day=None,
                cumulative_time=_field(fields, time_idx),
                diff=_field(fields, diff_idx),
            )
        )
    return rows


def _column_index(header: dict[str, int], names: Sequence[str]) -> int | None:
    for name in names:
        if name in header:
            return header[name]
    return None


def _field(fields: list[str], index: int | None) -> str:
    if index is None or index >= len(fields):
        return ""
    return fields[index]


# =============================================================================
# Entry point
# =============================================================================

def extract_raw_rows(
    source_text: str,
    source_kind: SourceKind | str,
    strategies: Sequence[Strategy] = HTML_STRATEGIES,
) -> list[RawRow]:
    """Convert a result document into ordered split rows.

    Args:
        source_text: Already-fetched page markup or CSV text.
        source_kind: "html" or "csv".
        strategies: HTML strategies in priority order.

    Returns:
        Rows in source order; empty list if nothing matched.
    """
    kind = SourceKind(source_kind)
    if not source_text:
        return []

    if kind is SourceKind.CSV:
        rows = extract_csv(source_text)
        logger.debug(f"CSV strategy extracted {len(rows)} rows")
        return rows

    for strategy in strategies:
        rows = strategy(source_text)
        if rows:
            logger.debug(f"{strategy.__name__} extracted {len(rows)} rows")
            return rows

    logger.info("No result rows found in HTML source")
    return []
