"""Event duration between two times of day, wrapping past midnight."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from cotizador.schemas.quote_schema import EventDuration
from cotizador.utils import minutes_since_midnight, parse_time

MINUTES_PER_DAY = 24 * 60


class DurationCalculator:
    """Computes elapsed hours from a start and end time.

    An end time at or before the start is taken to be on the next day,
    so equal times give a full 24 hours. No upper bound is enforced.
    """

    def duration(self, start_time: Any, end_time: Any) -> EventDuration:
        start = parse_time(start_time)
        end = parse_time(end_time)
        if start is None or end is None:
            return EventDuration(hours=0.0)

        start_minutes = minutes_since_midnight(start)
        end_minutes = minutes_since_midnight(end)
        if end_minutes <= start_minutes:
            end_minutes += MINUTES_PER_DAY

        hours = Decimal(end_minutes - start_minutes) / Decimal(60)
        rounded = hours.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return EventDuration(hours=float(rounded))
