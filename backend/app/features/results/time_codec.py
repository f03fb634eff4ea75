"""Conversion between race time strings and integer seconds."""

from __future__ import annotations

import re

NOT_AVAILABLE = "N/A"

# Leading digits of a component: "45.3" → 45, "45s" → 45
LEADING_INT_RE = re.compile(r"\s*(\d+)")


def _to_int(part: str) -> int:
    match = LEADING_INT_RE.match(part)
    if not match:
        return 0
    return int(match.group(1))


def parse_duration(text: str | None) -> int:
    """Parse a duration string to seconds.

    Formats:
        "1:40:32" → 6032
        "04:12"   → 252
        "315"     → 315

    Each component is read as its leading integer ("45.3" → 45). Never
    raises: components without one count as 0.
    """
    if not text:
        return 0

    parts = text.strip().split(":")
    if len(parts) == 3:
        hours, minutes, seconds = (_to_int(p) for p in parts)
        total = hours * 3600 + minutes * 60 + seconds
    elif len(parts) == 2:
        minutes, seconds = (_to_int(p) for p in parts)
        total = minutes * 60 + seconds
    elif len(parts) == 1:
        total = _to_int(parts[0])
    else:
        total = 0

    return max(total, 0)


def format_duration(seconds: int | None) -> str:
    """Format seconds as 'M:SS' (under an hour) or 'H:MM:SS'.

    0 and None render as 'N/A'.
    """
    if not seconds:
        return NOT_AVAILABLE

    seconds = int(seconds)
    if seconds < 0:
        return "-" + format_duration(-seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
