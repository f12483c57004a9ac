"""Command-line interface for tablemate."""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tablemate.app_logging import configure_logging
from tablemate.matcher import MAX_MEETING_DAYS
from tablemate.output import format_report, format_report_csv
from tablemate.parser import create_event_template, parse_event_yaml, parse_members_csv
from tablemate.ranker import MAX_TOP_CUISINES
from tablemate.report import build_report
from tablemate.search import search_parameters

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for tablemate CLI."""
    parser = argparse.ArgumentParser(
        description="Find when a group can meet and which cuisines they agree on.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  tablemate event.yaml
  tablemate event.yaml --members members.csv --format csv
  tablemate event.yaml --max-days 5 --search-params
""",
    )
    parser.add_argument(
        "event_yaml",
        type=Path,
        help="Path to the event YAML file with the organizer and friends",
    )
    parser.add_argument(
        "--members",
        type=Path,
        help="Path to a CSV export of manually entered members",
    )
    parser.add_argument(
        "--max-days",
        type=int,
        default=MAX_MEETING_DAYS,
        help=f"Maximum days with common availability to report (default: {MAX_MEETING_DAYS})",
    )
    parser.add_argument(
        "--max-cuisines",
        type=int,
        default=MAX_TOP_CUISINES,
        help=f"Maximum cuisines to rank (default: {MAX_TOP_CUISINES})",
    )
    parser.add_argument(
        "--format",
        choices=["text", "csv"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--search-params",
        action="store_true",
        help="Also print the restaurant search query derived from the report",
    )
    parser.add_argument(
        "--timezone",
        default="UTC",
        help="IANA timezone the availability times are in, used for --search-params "
        "(default: UTC)",
    )
    parser.add_argument(
        "--output-template",
        type=Path,
        help="Path for event template when the event file is missing "
        "(default: event_template.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        tz = ZoneInfo(args.timezone)
    except (ZoneInfoNotFoundError, ValueError):
        print(f"Error: Unknown timezone: {args.timezone}", file=sys.stderr)
        return 1

    if args.max_days < 1:
        print(f"Error: --max-days must be at least 1, got {args.max_days}", file=sys.stderr)
        return 1

    # Validate event file exists, offering a template otherwise
    if not args.event_yaml.exists():
        template_path = args.output_template or Path("event_template.yaml")
        create_event_template(template_path)
        print(f"Error: Event file not found: {args.event_yaml}", file=sys.stderr)
        print(f"Created a template at: {template_path}", file=sys.stderr)
        return 1

    try:
        draft = parse_event_yaml(args.event_yaml)
    except Exception as e:
        print(f"Error parsing event YAML: {e}", file=sys.stderr)
        return 1

    if args.members:
        if not args.members.exists():
            print(f"Error: Members file not found: {args.members}", file=sys.stderr)
            return 1
        try:
            draft.manual_members.extend(parse_members_csv(args.members))
        except Exception as e:
            print(f"Error parsing members CSV: {e}", file=sys.stderr)
            return 1

    logger.info(
        "Loaded %d friend(s) and %d manual member(s)",
        len(draft.friends),
        len(draft.manual_members),
    )

    report = build_report(
        draft.organizer,
        draft.friends,
        draft.manual_members,
        max_days=args.max_days,
        max_cuisines=args.max_cuisines,
    )

    if args.format == "csv":
        print(format_report_csv(report))
    else:
        print(format_report(report))

    if args.search_params:
        params = search_parameters(report, datetime.now(tz=tz))
        print()
        print(json.dumps(params))

    return 0


if __name__ == "__main__":
    sys.exit(main())
