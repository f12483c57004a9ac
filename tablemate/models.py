"""Data models for tablemate."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from enum import Enum
from functools import total_ordering


class InvalidIntervalError(ValueError):
    """Raised when a time interval ends before it starts."""


@total_ordering
class DayOfWeek(Enum):
    """Weekday, ordered Monday to Sunday."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def full_name(self) -> str:
        return self.name.title()

    @property
    def short_name(self) -> str:
        return self.full_name[:3]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DayOfWeek):
            return NotImplemented
        return self.value < other.value

    @classmethod
    def parse(cls, text: str) -> "DayOfWeek":
        """Parse a full or three-letter day name, in any case."""
        cleaned = text.strip().lower()
        for day in cls:
            if cleaned in (day.full_name.lower(), day.short_name.lower()):
                return day
        raise ValueError(f"Unknown day of week: {text!r}")


class Cuisine(Enum):
    """Cuisine types; declaration order is the canonical ranking tie-break."""

    ITALIAN = "Italian"
    JAPANESE = "Japanese"
    MEXICAN = "Mexican"
    INDIAN = "Indian"
    CHINESE = "Chinese"
    FRENCH = "French"
    AMERICAN = "American"
    MEDITERRANEAN = "Mediterranean"
    THAI = "Thai"
    VIETNAMESE = "Vietnamese"

    @property
    def emoji(self) -> str:
        return CUISINE_EMOJI[self]

    @property
    def index(self) -> int:
        return list(Cuisine).index(self)

    @classmethod
    def parse(cls, text: str) -> "Cuisine":
        """Parse a cuisine name, ignoring case."""
        cleaned = text.strip().lower()
        for cuisine in cls:
            if cuisine.value.lower() == cleaned:
                return cuisine
        raise ValueError(f"Unknown cuisine: {text!r}")


CUISINE_EMOJI: dict[Cuisine, str] = {
    Cuisine.ITALIAN: "🍝",
    Cuisine.JAPANESE: "🍣",
    Cuisine.MEXICAN: "🌮",
    Cuisine.INDIAN: "🍛",
    Cuisine.CHINESE: "🥡",
    Cuisine.FRENCH: "🥐",
    Cuisine.AMERICAN: "🍔",
    Cuisine.MEDITERRANEAN: "🥙",
    Cuisine.THAI: "🍜",
    Cuisine.VIETNAMESE: "🍲",
}


@dataclass(frozen=True)
class TimeInterval:
    """A time-of-day range with start <= end."""

    start: time
    end: time

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidIntervalError(
                f"Interval start {self.start:%H:%M} is after end {self.end:%H:%M}"
            )

    @property
    def duration(self) -> timedelta:
        anchor = datetime.min
        return datetime.combine(anchor, self.end) - datetime.combine(anchor, self.start)

    @classmethod
    def parse(cls, text: str) -> "TimeInterval":
        """Parse an interval written as "HH:MM-HH:MM"."""
        start_text, sep, end_text = text.partition("-")
        if not sep:
            raise ValueError(f"Malformed interval (expected HH:MM-HH:MM): {text!r}")
        try:
            start = time.fromisoformat(start_text.strip())
            end = time.fromisoformat(end_text.strip())
        except ValueError as e:
            raise ValueError(f"Malformed interval {text!r}: {e}") from e
        return cls(start=start, end=end)

    def __str__(self) -> str:
        return f"{self.start:%H:%M}-{self.end:%H:%M}"


@dataclass(frozen=True)
class PersonPreferences:
    """Preferences of one participant in an event draft."""

    name: str = ""
    availability: Mapping[DayOfWeek, tuple[TimeInterval, ...]] = field(default_factory=dict)
    preferred_days: frozenset[DayOfWeek] = frozenset()  # display only, not used for matching
    favorite_cuisines: frozenset[Cuisine] = frozenset()

    def intervals_for(self, day: DayOfWeek) -> tuple[TimeInterval, ...]:
        """Return the intervals stated for a day; absent days have none."""
        return tuple(self.availability.get(day, ()))


@dataclass(frozen=True)
class MeetingReport:
    """Common availability and cuisine consensus for a group."""

    best_meeting_times: dict[DayOfWeek, list[TimeInterval]]
    top_cuisines: list[Cuisine]
    participant_count: int = 0
