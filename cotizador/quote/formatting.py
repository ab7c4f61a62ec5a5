"""es-MX date and 12-hour clock formatting for quote summaries."""

from datetime import date, time

WEEKDAYS_ES = (
    "lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo",
)

MONTHS_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


def format_long_date(value: date) -> str:
    """Long weekday-inclusive form, e.g. ``martes, 20 de octubre de 2026``."""
    weekday = WEEKDAYS_ES[value.weekday()]
    month = MONTHS_ES[value.month - 1]
    return f"{weekday}, {value.day} de {month} de {value.year}"


def format_time_12h(value: time) -> str:
    """Convert to a 12-hour clock: ``19:05`` -> ``7:05 PM``, ``00:30`` -> ``12:30 AM``."""
    period = "PM" if value.hour >= 12 else "AM"
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {period}"
