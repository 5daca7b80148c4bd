# Domain Schedule Package
from .geometry import (
    day_of,
    day_range_label,
    format_hour_label,
    is_weekend_day,
    iter_week_slots,
    parse_hour,
    parse_slot_identifier,
    slot_identifier,
    valid_hours,
)
from .models import Day, DayStatistics, Slot, SlotType, TypeCounts, WeekStatistics
from .ports import KeyValueStore, SystemClock

__all__ = [
    "Day",
    "Slot",
    "SlotType",
    "TypeCounts",
    "DayStatistics",
    "WeekStatistics",
    "KeyValueStore",
    "SystemClock",
    "is_weekend_day",
    "valid_hours",
    "format_hour_label",
    "day_range_label",
    "slot_identifier",
    "parse_hour",
    "parse_slot_identifier",
    "iter_week_slots",
    "day_of",
]
