"""Human-relative durations ("about 2 hours ago")."""

from __future__ import annotations

import time
from typing import Optional

MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43200
MINUTES_IN_TWO_MONTHS = 86400


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_distance(seconds: float) -> str:
    """Describe an absolute distance in seconds, with sub-minute precision."""
    seconds = abs(seconds)
    minutes = round(seconds / 60)

    if minutes < 2:
        if seconds < 5:
            return "less than 5 seconds"
        if seconds < 10:
            return "less than 10 seconds"
        if seconds < 20:
            return "less than 20 seconds"
        if seconds < 40:
            return "half a minute"
        if seconds < 60:
            return "less than a minute"
        return "1 minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < MINUTES_IN_DAY:
        return f"about {_plural(round(minutes / 60), 'hour')}"
    if minutes < MINUTES_IN_DAY * 1.75:
        return "1 day"
    if minutes < MINUTES_IN_MONTH:
        return _plural(round(minutes / MINUTES_IN_DAY), "day")
    if minutes < MINUTES_IN_TWO_MONTHS:
        return f"about {_plural(round(minutes / MINUTES_IN_MONTH), 'month')}"

    months = int(minutes // MINUTES_IN_MONTH)
    if months < 12:
        return _plural(round(minutes / MINUTES_IN_MONTH), "month")

    years, remainder = divmod(months, 12)
    if remainder < 3:
        return f"about {_plural(years, 'year')}"
    if remainder < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def format_distance_to_now(epoch_seconds: float, now: Optional[float] = None) -> str:
    """Relative distance between a Unix timestamp and now, with a suffix."""
    if now is None:
        now = time.time()
    delta = now - epoch_seconds
    distance = format_distance(delta)
    return f"{distance} ago" if delta >= 0 else f"in {distance}"


def parse_epoch(value: Optional[str]) -> Optional[int]:
    """Parse an epoch-seconds string. Zero, empty or garbage gives None."""
    if value is None:
        return None
    try:
        seconds = int(str(value).strip())
    except ValueError:
        return None
    return seconds or None


def format_last_connected(value: Optional[str], now: Optional[float] = None) -> str:
    seconds = parse_epoch(value)
    if seconds is None:
        return "-"
    return format_distance_to_now(seconds, now)
