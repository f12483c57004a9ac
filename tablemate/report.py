"""Meeting report assembly."""

import logging
from collections.abc import Iterable, Sequence

from tablemate.matcher import MAX_MEETING_DAYS, compute_best_meeting_times
from tablemate.models import MeetingReport, PersonPreferences
from tablemate.ranker import MAX_TOP_CUISINES, compute_top_cuisines

logger = logging.getLogger(__name__)


def build_report(
    organizer: PersonPreferences | None,
    friends: Iterable[PersonPreferences] = (),
    manual_members: Iterable[PersonPreferences] = (),
    *,
    max_days: int = MAX_MEETING_DAYS,
    max_cuisines: int = MAX_TOP_CUISINES,
) -> MeetingReport:
    """
    Build a meeting report for an event draft.

    Participants are ordered organizer first, then friends in selection order,
    then manually entered members in entry order.
    """
    participants: list[PersonPreferences] = []
    if organizer is not None:
        participants.append(organizer)
    participants.extend(friends)
    participants.extend(manual_members)

    return build_report_for(participants, max_days=max_days, max_cuisines=max_cuisines)


def build_report_for(
    participants: Sequence[PersonPreferences],
    *,
    max_days: int = MAX_MEETING_DAYS,
    max_cuisines: int = MAX_TOP_CUISINES,
) -> MeetingReport:
    """Build a meeting report from an already ordered participant list."""
    logger.info("Building meeting report for %d participant(s)", len(participants))
    best_times = compute_best_meeting_times(participants, max_days=max_days)
    top_cuisines = compute_top_cuisines(participants, limit=max_cuisines)
    return MeetingReport(
        best_meeting_times=best_times,
        top_cuisines=top_cuisines,
        participant_count=len(participants),
    )
