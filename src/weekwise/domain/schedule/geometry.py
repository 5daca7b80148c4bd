"""
Schedule geometry: which hours each day covers and how they are named.

Pure functions. Weekdays cover the evening (8 PM to midnight), weekends the
whole waking day (8 AM to midnight).
"""

import re
from collections.abc import Iterator
from datetime import date

from weekwise.domain.constants import (
    DAY_END_HOUR,
    SLOT_ID_SEPARATOR,
    WEEKDAY_FIRST_HOUR,
    WEEKEND_FIRST_HOUR,
)
from weekwise.domain.errors import InvalidSlotError

from .models import Day

WEEKEND = frozenset({Day.SATURDAY, Day.SUNDAY})


def is_weekend_day(day: Day | str) -> bool:
    return Day.parse(day) in WEEKEND


def valid_hours(day: Day | str) -> list[int]:
    """
    Hours of the day that belong to the schedule, ascending.

    Weekday: [20, 21, 22, 23]. Weekend: [8, 9, ..., 23].
    """
    start = WEEKEND_FIRST_HOUR if is_weekend_day(day) else WEEKDAY_FIRST_HOUR
    return list(range(start, DAY_END_HOUR))


def _short_hour(hour: int) -> str:
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12} {suffix}"


def format_hour_label(hour: int) -> str:
    """
    Render an hour on a 12-hour clock, e.g. 20 -> "8:00 PM", 0 -> "12:00 AM".
    """
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise InvalidSlotError(f"Hour must be an integer in [0, 23], got {hour!r}")
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}:00 {suffix}"


_HOUR_TEXT = re.compile(r"^(\d{1,2})(?::00)?\s*([ap]\.?m\.?)?$", re.IGNORECASE)


def parse_hour(text: str | int) -> int:
    """
    Read an hour given as 0-23 ("20") or on a 12-hour clock ("8PM", "8:00 pm").
    """
    if isinstance(text, int) and not isinstance(text, bool):
        hour = text
    else:
        match = _HOUR_TEXT.match(str(text).strip())
        if not match:
            raise InvalidSlotError(f"Cannot read an hour from {text!r}")
        hour = int(match.group(1))
        suffix = match.group(2)
        if suffix:
            if not 1 <= hour <= 12:
                raise InvalidSlotError(f"Cannot read an hour from {text!r}")
            hour = hour % 12 + (12 if suffix.lower().startswith("p") else 0)
    if not 0 <= hour <= 23:
        raise InvalidSlotError(f"Hour must be in [0, 23], got {text!r}")
    return hour


def day_range_label(day: Day | str) -> str:
    """Column subtitle spanning the day's schedule, e.g. "8 PM — 12 AM"."""
    hours = valid_hours(day)
    return f"{_short_hour(hours[0])} — {_short_hour(DAY_END_HOUR % 24)}"


def check_hour(day: Day | str, hour: int) -> tuple[Day, int]:
    """Validate a (day, hour) pair against the schedule and return it normalised."""
    parsed = Day.parse(day)
    if isinstance(hour, bool) or not isinstance(hour, int) or hour not in valid_hours(parsed):
        raise InvalidSlotError(f"{hour!r} is not a scheduled hour on {parsed.value}")
    return parsed, hour


def slot_identifier(day: Day | str, hour: int) -> str:
    """
    Stable storage key for a (day, hour) pair, e.g. "Monday__20".
    """
    parsed, hour = check_hour(day, hour)
    return f"{parsed.value}{SLOT_ID_SEPARATOR}{hour}"


def parse_slot_identifier(key: str) -> tuple[Day, int]:
    """
    Inverse of slot_identifier.

    Raises:
        InvalidSlotError: if the key is malformed or names an unscheduled hour.
    """
    if not isinstance(key, str) or key.count(SLOT_ID_SEPARATOR) != 1:
        raise InvalidSlotError(f"Malformed slot identifier: {key!r}")
    day_name, hour_text = key.split(SLOT_ID_SEPARATOR)
    try:
        day = Day(day_name)
    except ValueError:
        raise InvalidSlotError(f"Malformed slot identifier: {key!r}") from None
    if not (hour_text.isascii() and hour_text.isdigit()):
        raise InvalidSlotError(f"Malformed slot identifier: {key!r}")
    return check_hour(day, int(hour_text))


def iter_week_slots() -> Iterator[tuple[Day, int]]:
    """Every scheduled (day, hour) pair, Monday first."""
    for day in Day.ordered():
        for hour in valid_hours(day):
            yield day, hour


def day_of(moment: date) -> Day:
    """Day of the week for a date or datetime."""
    return Day.ordered()[moment.weekday()]
