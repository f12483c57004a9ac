"""YAML and CSV parsing for tablemate."""

import csv
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from tablemate.models import Cuisine, DayOfWeek, PersonPreferences, TimeInterval

# Separators used by the member form export
LIST_SEPARATOR = ","
INTERVAL_SEPARATOR = ";"


@dataclass
class EventDraft:
    """Participants collected for an event before a report is built."""

    organizer: PersonPreferences | None = None
    friends: list[PersonPreferences] = field(default_factory=list)
    manual_members: list[PersonPreferences] = field(default_factory=list)

    def participants(self) -> list[PersonPreferences]:
        """Return organizer, friends and manual members in that order."""
        people = [self.organizer] if self.organizer is not None else []
        return people + self.friends + self.manual_members


def _parse_intervals(raw: Any, who: str, day: DayOfWeek) -> tuple[TimeInterval, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = [chunk for chunk in raw.split(INTERVAL_SEPARATOR) if chunk.strip()]
    intervals: list[TimeInterval] = []
    for text in raw:
        try:
            intervals.append(TimeInterval.parse(str(text)))
        except ValueError as e:
            raise ValueError(f"{who}: bad interval on {day.full_name}: {e}") from e
    return tuple(intervals)


def _parse_names(raw: Any) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return [chunk.strip() for chunk in raw.split(LIST_SEPARATOR) if chunk.strip()]
    return [str(item) for item in raw]


def _parse_days(names: Iterable[str], who: str) -> frozenset[DayOfWeek]:
    try:
        return frozenset(DayOfWeek.parse(name) for name in names)
    except ValueError as e:
        raise ValueError(f"{who}: {e}") from e


def _parse_cuisines(names: Iterable[str], who: str) -> frozenset[Cuisine]:
    try:
        return frozenset(Cuisine.parse(name) for name in names)
    except ValueError as e:
        raise ValueError(f"{who}: {e}") from e


def parse_person(entry: dict[str, Any]) -> PersonPreferences:
    """
    Parse one participant entry from the event file.

    Raises ValueError naming the participant for unknown days or cuisines
    and for malformed intervals.
    """
    name = str(entry.get("name") or "").strip()
    who = name or "<unnamed participant>"

    availability: dict[DayOfWeek, tuple[TimeInterval, ...]] = {}
    for day_name, raw_intervals in (entry.get("availability") or {}).items():
        try:
            day = DayOfWeek.parse(str(day_name))
        except ValueError as e:
            raise ValueError(f"{who}: {e}") from e
        intervals = _parse_intervals(raw_intervals, who, day)
        if intervals:
            availability[day] = availability.get(day, ()) + intervals

    return PersonPreferences(
        name=name,
        availability=availability,
        preferred_days=_parse_days(_parse_names(entry.get("preferred_days")), who),
        favorite_cuisines=_parse_cuisines(_parse_names(entry.get("favorite_cuisines")), who),
    )


def parse_event_yaml(yaml_path: Path) -> EventDraft:
    """Parse the event YAML file."""
    with yaml_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        return EventDraft()

    organizer_entry = data.get("organizer")
    return EventDraft(
        organizer=parse_person(organizer_entry) if organizer_entry else None,
        friends=[parse_person(entry) for entry in data.get("friends") or []],
        manual_members=[parse_person(entry) for entry in data.get("members") or []],
    )


def parse_members_csv(csv_path: Path) -> list[PersonPreferences]:
    """
    Parse a CSV export of the manual member form.

    Expected columns are "Name", "Favorite Cuisines", "Preferred Days" and
    one column per weekday holding ";"-separated HH:MM-HH:MM intervals.
    """
    members: list[PersonPreferences] = []

    with csv_path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        fieldnames = reader.fieldnames or []

        # Map weekday columns by name, whatever their case or abbreviation
        day_columns: dict[str, DayOfWeek] = {}
        for col in fieldnames:
            try:
                day_columns[col] = DayOfWeek.parse(col)
            except ValueError:
                continue

        for row in reader:
            name = (row.get("Name") or "").strip()
            if not name:
                continue

            # Columns naming the same day (e.g. "Monday" and "Mon") are combined
            availability: dict[str, list[str]] = {}
            for col, day in day_columns.items():
                cell = (row.get(col) or "").strip()
                if cell:
                    availability.setdefault(day.full_name, []).append(cell)

            entry: dict[str, Any] = {
                "name": name,
                "favorite_cuisines": row.get("Favorite Cuisines") or "",
                "preferred_days": row.get("Preferred Days") or "",
                "availability": {
                    day_name: INTERVAL_SEPARATOR.join(cells)
                    for day_name, cells in availability.items()
                },
            }
            members.append(parse_person(entry))

    return members


def create_event_template(output_path: Path) -> None:
    """Create an example event YAML file."""
    template = {
        "organizer": {
            "name": "Your Name",
            "availability": {"monday": ["18:00-21:00"], "friday": ["19:00-22:00"]},
            "preferred_days": ["fri"],
            "favorite_cuisines": ["Italian", "Thai"],
        },
        "friends": [
            {
                "name": "Friend Name",
                "availability": {"friday": ["18:30-21:30"]},
                "preferred_days": ["fri", "sat"],
                "favorite_cuisines": ["Italian"],
            }
        ],
        "members": [],
    }

    header = f"""\
# Event file for tablemate
# List everyone joining the meal: yourself, friends and any other members.
#
# Days: {", ".join(day.full_name.lower() for day in DayOfWeek)}
#   (three-letter names like "mon" also work)
# Cuisines: {", ".join(cuisine.value for cuisine in Cuisine)}
#
# Availability is a list of "HH:MM-HH:MM" ranges per day.
# Days left out mean the person is not free that day.

"""

    with output_path.open("w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(template, f, default_flow_style=False, sort_keys=False)
