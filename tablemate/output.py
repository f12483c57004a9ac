"""Output formatting for tablemate."""

from tablemate.models import MeetingReport


def format_report(report: MeetingReport) -> str:
    """Format a meeting report for display."""
    lines: list[str] = [f"Participants: {report.participant_count}", ""]

    lines.append("=== Best Meeting Times ===")
    if not report.best_meeting_times:
        lines.append("No time works for everyone.")
        lines.append("Ask the group to add more availability.")
    else:
        for day in sorted(report.best_meeting_times):
            windows = ", ".join(str(window) for window in report.best_meeting_times[day])
            lines.append(f"  {day.full_name:<10} {windows}")
    lines.append("")

    lines.append("=== Top Cuisines ===")
    if not report.top_cuisines:
        lines.append("No favorite cuisines shared yet.")
    else:
        for rank, cuisine in enumerate(report.top_cuisines, start=1):
            lines.append(f"  {rank}. {cuisine.emoji} {cuisine.value}")

    return "\n".join(lines)


def format_report_csv(report: MeetingReport) -> str:
    """Format common meeting windows as CSV for export."""
    lines: list[str] = ["day,start,end"]

    for day in sorted(report.best_meeting_times):
        for window in report.best_meeting_times[day]:
            lines.append(f"{day.full_name.lower()},{window.start:%H:%M},{window.end:%H:%M}")

    return "\n".join(lines)
