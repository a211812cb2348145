"""Clock-time parsing and same-day flight duration."""

from __future__ import annotations

import re

from .constants import MINUTES_PER_DAY
from .errors import TimeParseError

_CLOCK_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def parse_clock_time(text: str) -> tuple[int, int]:
    """Parse ``H:mm``/``HH:mm`` (24-hour) into ``(hour, minute)``."""
    if not isinstance(text, str):
        raise TimeParseError(text)
    match = _CLOCK_PATTERN.fullmatch(text)
    if match is None:
        raise TimeParseError(text)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise TimeParseError(text)
    return hour, minute


def minutes_since_midnight(text: str) -> int:
    hour, minute = parse_clock_time(text)
    return hour * 60 + minute


def compute_duration(departure: str, arrival: str) -> int:
    """Minutes from departure to arrival on a 24-hour clock.

    An arrival earlier than the departure is read as crossing midnight once,
    so the result is always in ``[0, 1439]``. Flights of a day or longer
    cannot be represented.
    """
    minutes = minutes_since_midnight(arrival) - minutes_since_midnight(departure)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes
