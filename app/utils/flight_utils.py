"""Utility functions for flight search operations."""
import re
import logging
from datetime import date, datetime, time
from typing import Optional

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

_DURATION_PATTERN = re.compile(r"(\d+)h\s*(\d+)m")
_TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p")


def parse_calendar_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a date string to a calendar date.

    Accepts YYYY-MM-DD as well as full ISO 8601 timestamps
    (the time part is dropped).

    Args:
        value: Date string

    Returns:
        Parsed date or None if empty or unparseable
    """
    if not value or not value.strip():
        return None

    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError):
        logger.debug(f"Unparseable date: {value!r}")
        return None


def days_between(first: date, second: date) -> int:
    """Absolute difference in calendar days."""
    return abs((first - second).days)


def parse_duration_minutes(duration: Optional[str]) -> int:
    """
    Parse a duration like ``"5h 30m"`` to minutes.

    Args:
        duration: Free-form duration string

    Returns:
        Total minutes, or 0 if the string does not match ``<h>h <m>m``
    """
    if not duration:
        return 0

    match = _DURATION_PATTERN.search(duration)
    if match:
        return int(match.group(1)) * 60 + int(match.group(2))
    return 0


def parse_time_of_day(value: Optional[str]) -> Optional[time]:
    """
    Parse a time-of-day string (``"08:30"``, ``"08:30:00"``, ``"8:30 AM"``).

    Returns:
        Parsed time or None if unparseable
    """
    if not value:
        return None

    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    return None


def normalize_city(city: Optional[str]) -> str:
    """Lower-case a city query for substring matching."""
    return (city or "").lower()


def is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""
