"""Defensive parsing of raw form values shared across the quote pipeline.

Raw values come from the presentation layer with no type guarantees.
Every helper here is total: bad input gives a neutral default, never an
exception.
"""

import math
import re
from datetime import date, datetime, time
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Default int <-> str conversion limit on current interpreters.
MAX_COUNT_DIGITS = 4300


def clean_text(value: Any) -> str:
    """Return the value as a stripped string ('' for None)."""
    if value is None:
        return ""
    return str(value).strip()


def parse_count(value: Any) -> int:
    """Parse an integer count the way a browser number field reports it.

    Leading digits win and anything unparseable becomes 0.

    Examples:
        >>> parse_count("12")
        12
        >>> parse_count(" 7 mesas")
        7
        >>> parse_count("abc")
        0
        >>> parse_count(None)
        0
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match or len(match.group(1)) > MAX_COUNT_DIGITS:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # interpreter int-conversion limit lowered below MAX_COUNT_DIGITS
        return 0


def parse_time(value: Any) -> Optional[time]:
    """Parse an ``HH:MM`` (or ``HH:MM:SS``) time-of-day, None when invalid."""
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0, tzinfo=None)
    text = clean_text(value)
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    return None


def parse_date(value: Any) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` calendar date, None when invalid."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(clean_text(value), "%Y-%m-%d").date()
    except ValueError:
        return None


def minutes_since_midnight(value: time) -> int:
    return value.hour * 60 + value.minute
