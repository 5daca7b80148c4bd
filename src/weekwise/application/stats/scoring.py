"""
Scoring engine for deriving focus scores from the week's slots.

This is a pure computation module with no I/O.
"""

import math

from weekwise.application.slot_store import SlotStore
from weekwise.domain.constants import MAX_SCORE, MIN_SCORE, POINTS
from weekwise.domain.schedule.geometry import valid_hours
from weekwise.domain.schedule.models import (
    Day,
    DayStatistics,
    SlotType,
    TypeCounts,
    WeekStatistics,
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (2.5 -> 3), unlike round()."""
    return math.floor(value + 0.5)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class ScoringEngine:
    """
    Computes day and week statistics from a SlotStore.

    Stateless and side-effect free: every call recomputes from the store.
    """

    def __init__(self, points: dict[str, int] | None = None):
        self._points = dict(points or POINTS)
        # A filled hour can earn at most the best-valued type.
        self._best = max(self._points.values(), default=0)

    def points_for(self, slot_type: SlotType) -> int:
        return self._points.get(slot_type.value, 0)

    def compute_day_statistics(self, day: Day | str, store: SlotStore) -> DayStatistics:
        """
        Score one day.

        The score normalises by filled hours, not scheduled hours: an untouched
        day scores 0 and a day of nothing but study scores 100 no matter how
        many hours were filled.
        """
        day = Day.parse(day)
        hours = valid_hours(day)
        counts = TypeCounts()
        raw_score = 0

        for hour in hours:
            slot = store.get(day, hour)
            counts.add(slot.type)
            raw_score += self.points_for(slot.type)

        filled = len(hours) - counts.empty
        max_possible = filled * self._best
        score = 0
        if max_possible > 0:
            score = clamp(round_half_up(raw_score / max_possible * 100), MIN_SCORE, MAX_SCORE)

        return DayStatistics(
            day=day,
            counts=counts,
            raw_score=raw_score,
            filled_count=filled,
            max_possible=max_possible,
            score=score,
            total_slots=len(hours),
        )

    def compute_week_statistics(self, store: SlotStore) -> WeekStatistics:
        total_counts = TypeCounts()
        scores: list[int] = []
        filled_total = 0
        days: list[DayStatistics] = []

        for day in Day.ordered():
            stats = self.compute_day_statistics(day, store)
            days.append(stats)
            total_counts.merge(stats.counts)
            scores.append(stats.score)
            filled_total += stats.filled_count

        avg_score = round_half_up(sum(scores) / len(scores)) if scores else 0

        return WeekStatistics(
            total_counts=total_counts,
            scores=scores,
            avg_score=avg_score,
            filled_total=filled_total,
            days=days,
        )
