"""Restaurant search parameters derived from a meeting report."""

from datetime import datetime, timedelta

from tablemate.models import MeetingReport

DEFAULT_SEARCH_TERM = "restaurants"


def cuisine_term(report: MeetingReport) -> str:
    """Return the free-text search term for the group's top cuisines."""
    if not report.top_cuisines:
        return DEFAULT_SEARCH_TERM
    return ", ".join(cuisine.value for cuisine in report.top_cuisines)


def earliest_meeting_time(report: MeetingReport, now: datetime) -> datetime | None:
    """
    Return the earliest moment, on or after now, inside a common window.

    A window already in progress yields now itself. Windows are resolved as
    wall-clock times in now's timezone, so pass a ZoneInfo-aware now for
    correct dates across DST changes. Returns None when the report has no
    common time.
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    candidates: list[datetime] = []
    for day, windows in report.best_meeting_times.items():
        if not windows:
            continue
        days_ahead = (day.value - now.weekday()) % 7
        date = now.date() + timedelta(days=days_ahead)
        for window in windows:
            end = datetime.combine(date, window.end, tzinfo=now.tzinfo)
            if end > now:
                start = datetime.combine(date, window.start, tzinfo=now.tzinfo)
                candidates.append(max(start, now))
                break
        else:
            # Every window today has closed; use the same day next week
            next_week = date + timedelta(days=7)
            candidates.append(datetime.combine(next_week, windows[0].start, tzinfo=now.tzinfo))

    return min(candidates, default=None)


def search_parameters(report: MeetingReport, now: datetime) -> dict[str, str | int]:
    """
    Build query parameters for the restaurant search client.

    Returns a dict with "term" and, when the group has a common window,
    "open_at" as Unix seconds.
    """
    params: dict[str, str | int] = {"term": cuisine_term(report)}
    opens = earliest_meeting_time(report, now)
    if opens is not None:
        params["open_at"] = int(opens.timestamp())
    return params
