"""Tests for data models."""

from datetime import time, timedelta

import pytest

from tablemate.models import Cuisine, DayOfWeek, InvalidIntervalError, PersonPreferences, TimeInterval


def test_time_interval_rejects_reversed_bounds() -> None:
    with pytest.raises(InvalidIntervalError):
        TimeInterval(start=time(11, 0), end=time(10, 0))


def test_invalid_interval_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        TimeInterval.parse("12:00-08:00")


def test_time_interval_allows_degenerate() -> None:
    interval = TimeInterval(start=time(9, 0), end=time(9, 0))
    assert interval.duration == timedelta(0)


def test_time_interval_parse_and_str() -> None:
    interval = TimeInterval.parse("09:00 - 10:30")
    assert interval == TimeInterval(start=time(9, 0), end=time(10, 30))
    assert interval.duration == timedelta(minutes=90)
    assert str(interval) == "09:00-10:30"


@pytest.mark.parametrize("text", ["09:00", "nine-ten", "09:00-25:00"])
def test_time_interval_parse_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        TimeInterval.parse(text)


def test_day_of_week_parse_variants() -> None:
    assert DayOfWeek.parse("tuesday") is DayOfWeek.TUESDAY
    assert DayOfWeek.parse("Tue") is DayOfWeek.TUESDAY
    assert DayOfWeek.parse(" SUN ") is DayOfWeek.SUNDAY
    with pytest.raises(ValueError):
        DayOfWeek.parse("someday")


def test_day_of_week_order_and_names() -> None:
    assert list(DayOfWeek)[0] is DayOfWeek.MONDAY
    assert sorted([DayOfWeek.SUNDAY, DayOfWeek.MONDAY, DayOfWeek.FRIDAY]) == [
        DayOfWeek.MONDAY,
        DayOfWeek.FRIDAY,
        DayOfWeek.SUNDAY,
    ]
    assert DayOfWeek.WEDNESDAY.full_name == "Wednesday"
    assert DayOfWeek.WEDNESDAY.short_name == "Wed"


def test_cuisine_parse_and_canonical_index() -> None:
    assert Cuisine.parse("italian") is Cuisine.ITALIAN
    assert Cuisine.ITALIAN.index == 0
    assert Cuisine.AMERICAN.index == 6
    assert Cuisine.THAI.index == 8
    assert Cuisine.VIETNAMESE.index == 9
    assert Cuisine.THAI.emoji == "🍜"
    assert Cuisine.parse("MEDITERRANEAN") is Cuisine.MEDITERRANEAN
    assert Cuisine.MEDITERRANEAN.emoji == "🥙"
    assert Cuisine.VIETNAMESE.emoji == "🍲"
    with pytest.raises(ValueError):
        Cuisine.parse("Martian")


def test_person_absent_day_has_no_intervals() -> None:
    person = PersonPreferences(
        name="Ana",
        availability={DayOfWeek.MONDAY: (TimeInterval.parse("09:00-10:00"),)},
    )
    assert person.intervals_for(DayOfWeek.MONDAY) == (TimeInterval.parse("09:00-10:00"),)
    assert person.intervals_for(DayOfWeek.TUESDAY) == ()
