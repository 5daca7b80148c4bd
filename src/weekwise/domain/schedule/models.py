"""
Domain models for the weekly schedule.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from weekwise.domain.errors import InvalidSlotError


class Day(str, Enum):
    """A day of the week. Declaration order is the planner's Monday-first order."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def ordered(cls) -> list["Day"]:
        return list(cls)

    @classmethod
    def parse(cls, value: Any) -> "Day":
        """
        Coerce a Day, a full day name or a 3-letter abbreviation (any case) to a Day.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            needle = value.strip().lower()
            for day in cls:
                if needle in (day.value.lower(), day.short_name.lower()):
                    return day
        raise InvalidSlotError(f"Unknown day: {value!r}")

    @property
    def short_name(self) -> str:
        return self.value[:3]


class SlotType(str, Enum):
    STUDY = "study"
    ESSENTIAL = "essential"
    NONESSENTIAL = "nonessential"
    EMPTY = "empty"

    @classmethod
    def parse(cls, value: Any) -> "SlotType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidSlotError(f"Unknown slot type: {value!r}") from None


@dataclass(frozen=True)
class Slot:
    """
    The user's entry for one (day, hour) cell.

    Attributes:
        type: What the hour is spent on.
        title: Short label shown in the grid.
        notes: Free-text detail.
    """

    type: SlotType = SlotType.EMPTY
    title: str = ""
    notes: str = ""

    @classmethod
    def default(cls) -> "Slot":
        return cls()

    @property
    def is_default(self) -> bool:
        """An empty, untitled, note-less slot is equivalent to no entry at all."""
        return self.type is SlotType.EMPTY and not self.title and not self.notes

    @property
    def is_filled(self) -> bool:
        return self.type is not SlotType.EMPTY

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "title": self.title, "notes": self.notes}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Slot":
        """
        Build a slot from persisted data, tolerating missing or odd fields.

        Unknown types fall back to empty; non-string texts become blank.
        """
        try:
            slot_type = SlotType.parse(data.get("type") or SlotType.EMPTY)
        except InvalidSlotError:
            slot_type = SlotType.EMPTY
        title = data.get("title")
        notes = data.get("notes")
        return cls(
            type=slot_type,
            title=title if isinstance(title, str) else "",
            notes=notes if isinstance(notes, str) else "",
        )


@dataclass
class TypeCounts:
    """Number of hours spent on each slot type."""

    study: int = 0
    essential: int = 0
    nonessential: int = 0
    empty: int = 0

    def add(self, slot_type: SlotType, amount: int = 1) -> None:
        setattr(self, slot_type.value, getattr(self, slot_type.value) + amount)

    def merge(self, other: "TypeCounts") -> None:
        for slot_type in SlotType:
            self.add(slot_type, other.get(slot_type))

    def get(self, slot_type: SlotType) -> int:
        return getattr(self, slot_type.value)

    @property
    def total(self) -> int:
        return self.study + self.essential + self.nonessential + self.empty

    def to_dict(self) -> dict[str, int]:
        return {slot_type.value: self.get(slot_type) for slot_type in SlotType}


@dataclass
class DayStatistics:
    """
    Derived statistics for a single day.

    Attributes:
        day: The day these numbers describe.
        counts: Hours per slot type across the day's schedule.
        raw_score: Sum of slot points.
        filled_count: Hours whose type is not empty.
        max_possible: Best achievable raw score for the filled hours.
        score: Focus score in [0, 100].
        total_slots: Number of scheduled hours in the day.
    """

    day: Day
    counts: TypeCounts
    raw_score: int
    filled_count: int
    max_possible: int
    score: int
    total_slots: int


@dataclass
class WeekStatistics:
    """
    Aggregate over all seven days.

    `scores` and `days` are in Monday-first order.
    """

    total_counts: TypeCounts
    scores: list[int]
    avg_score: int
    filled_total: int
    days: list[DayStatistics] = field(default_factory=list)
