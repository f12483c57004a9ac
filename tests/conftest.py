"""Shared test helpers."""

from collections.abc import Callable

import pytest

from tablemate.models import Cuisine, DayOfWeek, PersonPreferences, TimeInterval


def iv(text: str) -> TimeInterval:
    """Shorthand for TimeInterval.parse."""
    return TimeInterval.parse(text)


@pytest.fixture
def make_person() -> Callable[..., PersonPreferences]:
    """Build a PersonPreferences from day-name keyword arguments."""

    def _make(
        name: str = "",
        cuisines: tuple[Cuisine, ...] = (),
        **days: list[str],
    ) -> PersonPreferences:
        availability = {
            DayOfWeek.parse(day): tuple(iv(text) for text in intervals)
            for day, intervals in days.items()
        }
        return PersonPreferences(
            name=name,
            availability=availability,
            favorite_cuisines=frozenset(cuisines),
        )

    return _make
