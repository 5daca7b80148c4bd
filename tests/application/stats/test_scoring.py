import pytest

from weekwise.application.stats.scoring import ScoringEngine, round_half_up
from weekwise.domain.schedule.geometry import valid_hours
from weekwise.domain.schedule.models import Day, Slot, SlotType


@pytest.fixture
def engine():
    return ScoringEngine()


def fill_day(store, day, slot_type):
    for hour in valid_hours(day):
        store.set(day, hour, Slot(slot_type))


def test_empty_day_scores_zero(engine, store):
    stats = engine.compute_day_statistics(Day.MONDAY, store)
    assert stats.score == 0
    assert stats.max_possible == 0
    assert stats.filled_count == 0
    assert stats.counts.empty == 4
    assert stats.total_slots == 4


def test_all_study_saturates(engine, store):
    fill_day(store, Day.SATURDAY, SlotType.STUDY)
    stats = engine.compute_day_statistics(Day.SATURDAY, store)
    assert stats.raw_score == 32
    assert stats.score == 100


def test_all_nonessential_floors_at_zero(engine, store):
    fill_day(store, Day.TUESDAY, SlotType.NONESSENTIAL)
    stats = engine.compute_day_statistics(Day.TUESDAY, store)
    assert stats.raw_score == -4
    assert stats.max_possible == 8
    assert stats.score == 0


def test_monday_example(engine, store):
    store.set(Day.MONDAY, 20, Slot(SlotType.STUDY))
    store.set(Day.MONDAY, 21, Slot(SlotType.ESSENTIAL))

    stats = engine.compute_day_statistics(Day.MONDAY, store)

    assert stats.counts.to_dict() == {"study": 1, "essential": 1, "nonessential": 0, "empty": 2}
    assert stats.filled_count == 2
    assert stats.raw_score == 3
    assert stats.max_possible == 4
    assert stats.score == 75


def test_titled_empty_slot_does_not_count_as_filled(engine, store):
    store.set(Day.MONDAY, 20, Slot(SlotType.EMPTY, title="tbd"))
    stats = engine.compute_day_statistics(Day.MONDAY, store)
    assert stats.filled_count == 0
    assert stats.score == 0


def test_score_rounds_half_up(engine, store):
    # raw 1 of max 8 -> 12.5 -> 13
    store.set(Day.THURSDAY, 20, Slot(SlotType.STUDY))
    store.set(Day.THURSDAY, 21, Slot(SlotType.ESSENTIAL))
    store.set(Day.THURSDAY, 22, Slot(SlotType.NONESSENTIAL))
    store.set(Day.THURSDAY, 23, Slot(SlotType.NONESSENTIAL))
    stats = engine.compute_day_statistics(Day.THURSDAY, store)
    assert stats.raw_score == 1
    assert stats.score == 13


def test_empty_week(engine, store):
    week = engine.compute_week_statistics(store)
    assert week.avg_score == 0
    assert week.filled_total == 0
    assert week.scores == [0] * 7
    assert week.total_counts.to_dict() == {
        "study": 0,
        "essential": 0,
        "nonessential": 0,
        "empty": 52,
    }


def test_week_counts_cover_every_scheduled_hour(engine, store):
    store.set(Day.MONDAY, 20, Slot(SlotType.STUDY))
    store.set(Day.SUNDAY, 8, Slot(SlotType.NONESSENTIAL))
    store.set(Day.SATURDAY, 15, Slot(SlotType.ESSENTIAL))
    week = engine.compute_week_statistics(store)
    assert week.total_counts.total == 52
    assert week.filled_total == 3


def test_week_scores_are_monday_first(engine, store):
    fill_day(store, Day.MONDAY, SlotType.STUDY)
    fill_day(store, Day.SUNDAY, SlotType.ESSENTIAL)
    week = engine.compute_week_statistics(store)
    assert week.scores == [100, 0, 0, 0, 0, 0, 50]
    # (100 + 50) / 7 = 21.43
    assert week.avg_score == 21
    assert [d.day for d in week.days] == Day.ordered()


def test_custom_points(store):
    engine = ScoringEngine(points={"study": 2, "essential": 2, "nonessential": -1, "empty": 0})
    store.set(Day.MONDAY, 20, Slot(SlotType.ESSENTIAL))
    assert engine.compute_day_statistics(Day.MONDAY, store).score == 100


def test_custom_points_normalise_by_best_type(store):
    engine = ScoringEngine(points={"study": 3, "essential": 1, "nonessential": -1, "empty": 0})
    store.set(Day.MONDAY, 20, Slot(SlotType.STUDY))
    store.set(Day.MONDAY, 21, Slot(SlotType.ESSENTIAL))
    stats = engine.compute_day_statistics(Day.MONDAY, store)
    assert stats.raw_score == 4
    assert stats.max_possible == 6
    assert stats.score == 67


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(2.5) == 3
    assert round_half_up(-12.5) == -12
    assert round_half_up(74.4) == 74
