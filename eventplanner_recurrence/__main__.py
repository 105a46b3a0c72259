"""Command-line entry for eventplanner_recurrence.

Lets operators check how a rule string is parsed, expanded and summarized
without going through the HTTP API.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import NoReturn, Optional

from .core.config_manager import ConfigManager, RecurrenceConfig
from .exceptions import RecurrenceError
from .logging_config import configure_logging
from .recurrence import (
    build_summary,
    expand_recurrence,
    occurs_on,
    parse_recurrence_rule,
    to_rrule_string,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_RULE = 2


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from None


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the eventplanner_recurrence CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="eventplanner-recurrence",
        description="Parse, expand and summarize event planner recurrence rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m eventplanner_recurrence parse "WEEKLY:MONDAY,FRIDAY"
  python -m eventplanner_recurrence expand "MONTHLY:2:TUESDAY" --start 2025-01-01 --end 2025-12-31
  python -m eventplanner_recurrence summary "WEEKLY:MON,FRI" --start 2025-06-02
        """,
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="Parse a rule and print it as JSON")
    parse_cmd.add_argument("rule")

    expand_cmd = sub.add_parser("expand", help="List occurrence dates in a window")
    expand_cmd.add_argument("rule")
    expand_cmd.add_argument("--start", type=_iso_date, required=True, metavar="YYYY-MM-DD")
    expand_cmd.add_argument("--end", type=_iso_date, required=True, metavar="YYYY-MM-DD")
    expand_cmd.add_argument(
        "--skip",
        type=_iso_date,
        action="append",
        default=[],
        metavar="YYYY-MM-DD",
        help="Date to exclude (repeatable)",
    )

    occurs_cmd = sub.add_parser("occurs", help="Check whether a rule fires on a date")
    occurs_cmd.add_argument("rule")
    occurs_cmd.add_argument("date", type=_iso_date)

    summary_cmd = sub.add_parser("summary", help="Print a human-readable summary")
    summary_cmd.add_argument("rule")
    summary_cmd.add_argument("--start", type=_iso_date, required=True, metavar="YYYY-MM-DD")
    summary_cmd.add_argument("--end", type=_iso_date, default=None, metavar="YYYY-MM-DD")

    rrule_cmd = sub.add_parser("rrule", help="Print the equivalent RFC 5545 RRULE")
    rrule_cmd.add_argument("rule")

    return parser


def run(args: argparse.Namespace, config: RecurrenceConfig) -> int:
    """Execute a parsed command and return the exit code."""
    try:
        parsed = parse_recurrence_rule(args.rule)
    except RecurrenceError as exc:
        print(f"error: {exc.error_code.value}: {exc}", file=sys.stderr)
        return EXIT_INVALID_RULE

    if args.command == "parse":
        print(json.dumps(parsed.model_dump(mode="json"), sort_keys=True))
    elif args.command == "expand":
        span_days = (args.end - args.start).days + 1
        if span_days > config.max_expansion_days:
            print(
                f"error: window of {span_days} days exceeds the limit of "
                f"{config.max_expansion_days} days",
                file=sys.stderr,
            )
            return EXIT_INVALID_RULE
        for day in expand_recurrence(parsed, args.start, args.end, set(args.skip)):
            print(day.isoformat())
    elif args.command == "occurs":
        print("true" if occurs_on(parsed, args.date) else "false")
    elif args.command == "summary":
        print(build_summary(parsed, args.start, args.end))
    elif args.command == "rrule":
        print(f"RRULE:{to_rrule_string(parsed)}")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> NoReturn:
    """Run the eventplanner_recurrence CLI."""
    parser = _create_parser()
    args = parser.parse_args(argv)

    config = ConfigManager().load_full_config()
    configure_logging(debug_mode=args.debug, level_name=config.log_level)
    logger.debug("Running command %s with config %s", args.command, config)

    sys.exit(run(args, config))


if __name__ == "__main__":
    main()
