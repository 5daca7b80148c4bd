from datetime import date, datetime

import pytest

from weekwise.domain.errors import InvalidSlotError
from weekwise.domain.schedule import (
    Day,
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

WEEKDAYS = [Day.MONDAY, Day.TUESDAY, Day.WEDNESDAY, Day.THURSDAY, Day.FRIDAY]


def test_days_are_monday_first():
    assert [d.value for d in Day.ordered()] == [
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    ]


@pytest.mark.parametrize("day", list(Day))
def test_valid_hours_matches_weekend_flag(day):
    hours = valid_hours(day)
    assert hours
    assert hours == sorted(set(hours))
    if is_weekend_day(day):
        assert hours == list(range(8, 24))
    else:
        assert hours == [20, 21, 22, 23]


def test_weekend_detection():
    assert is_weekend_day(Day.SATURDAY)
    assert is_weekend_day("Sunday")
    assert not any(is_weekend_day(d) for d in WEEKDAYS)


@pytest.mark.parametrize(
    "hour,label",
    [
        (0, "12:00 AM"),
        (8, "8:00 AM"),
        (12, "12:00 PM"),
        (13, "1:00 PM"),
        (20, "8:00 PM"),
        (23, "11:00 PM"),
    ],
)
def test_format_hour_label(hour, label):
    assert format_hour_label(hour) == label


@pytest.mark.parametrize("hour", [-1, 24, True])
def test_format_hour_label_rejects_out_of_range(hour):
    with pytest.raises(InvalidSlotError):
        format_hour_label(hour)


def test_slot_identifier_is_stable_and_unique():
    keys = [slot_identifier(day, hour) for day, hour in iter_week_slots()]
    assert len(keys) == 52
    assert len(set(keys)) == 52
    assert slot_identifier(Day.MONDAY, 20) == "Monday__20"
    assert slot_identifier("sat", 8) == "Saturday__8"


def test_slot_identifier_rejects_unscheduled_hour():
    with pytest.raises(InvalidSlotError):
        slot_identifier(Day.MONDAY, 8)
    with pytest.raises(ValueError):
        slot_identifier("Funday", 20)


def test_parse_slot_identifier_inverts_identifier():
    for day, hour in iter_week_slots():
        assert parse_slot_identifier(slot_identifier(day, hour)) == (day, hour)


@pytest.mark.parametrize(
    "key",
    ["Monday_20", "Monday__x", "Monday__8", "Someday__20", "Monday__20__1", "Monday__²", ""],
)
def test_parse_slot_identifier_rejects_garbage(key):
    with pytest.raises(InvalidSlotError):
        parse_slot_identifier(key)


@pytest.mark.parametrize(
    "text,hour",
    [("20", 20), ("8PM", 20), ("8:00 PM", 20), ("8 am", 8), ("12AM", 0), ("12 pm", 12), (9, 9)],
)
def test_parse_hour(text, hour):
    assert parse_hour(text) == hour


@pytest.mark.parametrize("text", ["25", "13pm", "0am", "noon", "8:30 PM"])
def test_parse_hour_rejects(text):
    with pytest.raises(InvalidSlotError):
        parse_hour(text)


def test_day_range_label():
    assert day_range_label(Day.MONDAY) == "8 PM — 12 AM"
    assert day_range_label(Day.SUNDAY) == "8 AM — 12 AM"


def test_day_of():
    # 2026-10-19 is a Monday
    assert day_of(date(2026, 10, 19)) is Day.MONDAY
    assert day_of(datetime(2026, 10, 25, 21, 0)) is Day.SUNDAY


def test_day_parse_accepts_abbreviations():
    assert Day.parse("tue") is Day.TUESDAY
    assert Day.parse(" FRIDAY ") is Day.FRIDAY
    with pytest.raises(InvalidSlotError):
        Day.parse(3)
