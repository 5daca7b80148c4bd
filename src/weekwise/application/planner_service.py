"""
Planner Service — Application layer orchestrator.

The single entry point used by the CLI and HTTP surfaces: slot reads and
writes go to the SlotStore, statistics come from the ScoringEngine.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from weekwise.application.slot_store import SlotStore
from weekwise.application.stats.charts import WeekCharts, build_week_charts
from weekwise.application.stats.scoring import ScoringEngine
from weekwise.domain.schedule.geometry import (
    day_of,
    day_range_label,
    format_hour_label,
    valid_hours,
)
from weekwise.domain.schedule.models import (
    Day,
    DayStatistics,
    Slot,
    SlotType,
    WeekStatistics,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridCell:
    hour: int
    label: str
    slot: Slot
    is_now: bool = False


@dataclass(frozen=True)
class DayColumn:
    day: Day
    subtitle: str
    cells: list[GridCell]
    is_today: bool = False


class PlannerService:
    """
    Application service for editing the week and reading its statistics.

    Follows Dependency Inversion: the store arrives with its storage already
    chosen; the scoring engine is optional and defaults to standard points.
    """

    def __init__(self, store: SlotStore, engine: ScoringEngine | None = None):
        self._store = store
        self._engine = engine or ScoringEngine()

    @property
    def store(self) -> SlotStore:
        return self._store

    # -- reads --------------------------------------------------------------

    def get_slot(self, day: Day | str, hour: int) -> Slot:
        return self._store.get(day, hour)

    def day_statistics(self, day: Day | str) -> DayStatistics:
        return self._engine.compute_day_statistics(day, self._store)

    def week_statistics(self) -> WeekStatistics:
        return self._engine.compute_week_statistics(self._store)

    def charts(self) -> WeekCharts:
        return build_week_charts(self.week_statistics())

    def grid(self, now: datetime | None = None) -> list[DayColumn]:
        """
        The editable grid, Monday first.

        Args:
            now: When given, the matching day and hour are flagged so the
                surface can highlight them.
        """
        today = day_of(now) if now else None
        columns = []
        for day in Day.ordered():
            cells = [
                GridCell(
                    hour=hour,
                    label=format_hour_label(hour),
                    slot=self._store.get(day, hour),
                    is_now=day is today and now is not None and hour == now.hour,
                )
                for hour in valid_hours(day)
            ]
            columns.append(
                DayColumn(
                    day=day,
                    subtitle=day_range_label(day),
                    cells=cells,
                    is_today=day is today,
                )
            )
        return columns

    # -- writes -------------------------------------------------------------

    def set_slot(
        self,
        day: Day | str,
        hour: int,
        slot_type: SlotType | str = SlotType.EMPTY,
        title: str = "",
        notes: str = "",
    ) -> Slot:
        """
        Save an edit. Surrounding whitespace is trimmed; an empty slot with no
        text removes the entry.
        """
        slot = Slot(
            type=SlotType.parse(slot_type),
            title=(title or "").strip(),
            notes=(notes or "").strip(),
        )
        self._store.set(day, hour, slot)
        return slot

    def delete_slot(self, day: Day | str, hour: int) -> None:
        self._store.delete(day, hour)

    def clear(self) -> None:
        logger.info("Clearing the whole week")
        self._store.clear()
