"""Common availability matching across a group."""

import logging
from collections.abc import Sequence

from tablemate.intervals import intersect_all, merge_overlapping
from tablemate.models import DayOfWeek, PersonPreferences, TimeInterval

logger = logging.getLogger(__name__)

MAX_MEETING_DAYS = 3


def common_intervals(interval_lists: Sequence[Sequence[TimeInterval]]) -> list[TimeInterval]:
    """
    Fold intersect_all across every participant's intervals for one day.

    Returns a sorted, non-overlapping list; empty if any list is empty or the
    lists share no positive-length window.
    """
    if not interval_lists or any(not intervals for intervals in interval_lists):
        return []

    # Zero-length intervals never make a window, even for a lone participant
    candidates = merge_overlapping(iv for iv in interval_lists[0] if iv.start < iv.end)
    for intervals in interval_lists[1:]:
        # Merge after each step so overlapping hits don't multiply
        candidates = merge_overlapping(intersect_all(candidates, intervals))
        if not candidates:
            break

    return candidates


def compute_best_meeting_times(
    participants: Sequence[PersonPreferences],
    max_days: int = MAX_MEETING_DAYS,
) -> dict[DayOfWeek, list[TimeInterval]]:
    """
    Compute the windows every participant is free, per weekday.

    Days are scanned Monday to Sunday and scanning stops once max_days days
    have a common window, so earlier weekdays win. Zero participants yield
    an empty result.
    """
    if max_days < 1:
        raise ValueError(f"max_days must be at least 1, got {max_days}")

    best: dict[DayOfWeek, list[TimeInterval]] = {}
    if not participants:
        return best

    for day in DayOfWeek:
        per_person = [person.intervals_for(day) for person in participants]

        missing = [p.name or f"#{i}" for i, p in enumerate(participants) if not per_person[i]]
        if missing:
            logger.debug("Skipping %s: no availability for %s", day.full_name, ", ".join(missing))
            continue

        windows = common_intervals(per_person)
        if not windows:
            logger.debug("Skipping %s: no common window", day.full_name)
            continue

        best[day] = windows
        if len(best) >= max_days:
            break

    logger.debug("Found common availability on %d day(s)", len(best))
    return best
