"""
tessera.cli

Command-line entry point exposed as the ``tessera`` console script.

Commands:
 - date:     render a format template for now or a given ISO timestamp
 - calendar: show weekday, month, ISO week, quarter and day of year
 - read:     read a JSON (or raw text) file through read_file
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from typing import Callable, Optional, Sequence

import argcomplete

from tessera.base.logging import get_logger, setup_logging
from tessera.console import Console
from tessera.date import (
    day_of_week_name,
    day_of_year,
    format_date,
    iso_week_of_year,
    month_name,
    quarter_of_year,
    weekday_index,
)
from tessera.shared.loader import load_prefix_config
from tessera.shared.reader import ReadFileOptions, read_file

log = get_logger(__name__)

DEFAULT_TEMPLATE = "YYYY-MM-DD HH:mm:ss"


# ----------------------------------------------------------------------
# COMMANDS
# ----------------------------------------------------------------------

def _instant(args: argparse.Namespace) -> datetime:
    return args.at if args.at is not None else datetime.now()


def cmd_date(args: argparse.Namespace) -> int:
    print(format_date(_instant(args), args.template))
    return 0


def cmd_calendar(args: argparse.Namespace) -> int:
    moment = _instant(args)
    print(f"Weekday:     {day_of_week_name(weekday_index(moment))}")
    print(f"Month:       {month_name(moment.month - 1)}")
    print(f"ISO week:    {iso_week_of_year(moment)}")
    print(f"Quarter:     {quarter_of_year(moment)}")
    print(f"Day of year: {day_of_year(moment)}")
    return 0


def cmd_read(args: argparse.Namespace) -> int:
    options = ReadFileOptions(
        parse=not args.raw,
        verbose=args.verbose,
        exit_on_err=not args.no_exit,
    )
    console = Console(load_prefix_config(args.config))
    result = read_file(args.path, options, console=console)
    if not result.ok:
        log.warning("No content read from %s (%s)", result.path, result.failure.value)
        return 1
    if args.raw:
        print(result.value, end="")
    else:
        print(json.dumps(result.value, indent=2, ensure_ascii=False))
    return 0


# ----------------------------------------------------------------------
# PARSER
# ----------------------------------------------------------------------

def _iso_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 timestamp: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tessera", description="tessera utility helpers.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging verbosity (default: config file, else INFO).",
    )
    parser.add_argument("--config", help="Path to a tessera.yaml config file.")

    sub = parser.add_subparsers(dest="command", required=True)

    date_parser = sub.add_parser("date", help="Format a date with a token template.")
    date_parser.add_argument("template", nargs="?", default=DEFAULT_TEMPLATE)
    date_parser.add_argument("--at", type=_iso_datetime, help="ISO timestamp to format (default: now).")
    date_parser.set_defaults(func=cmd_date)

    calendar_parser = sub.add_parser("calendar", help="Show calendar facts for a date.")
    calendar_parser.add_argument("--at", type=_iso_datetime, help="ISO timestamp (default: now).")
    calendar_parser.set_defaults(func=cmd_calendar)

    read_parser = sub.add_parser("read", help="Read a JSON file (or raw text with --raw).")
    read_parser.add_argument("path")
    read_parser.add_argument("--raw", action="store_true", help="Print the content without JSON decoding.")
    read_parser.add_argument("--verbose", action="store_true", help="Report the underlying error on failure.")
    read_parser.add_argument("--no-exit", action="store_true", help="Return a failure code instead of exiting.")
    read_parser.set_defaults(func=cmd_read)

    return parser


# ----------------------------------------------------------------------
# WRAPPER FUNCTION
# ----------------------------------------------------------------------

def run_cli(main_func: Callable[[argparse.Namespace], int], args: argparse.Namespace) -> int:
    """Run a command with unified error handling and exit codes."""
    try:
        return main_func(args)
    except KeyboardInterrupt:
        log.warning("⚠️ Operation cancelled by user.")
        return 130
    except Exception as e:
        log.error(f"❌ Unexpected error: {e}", exc_info=True)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, config_path=args.config)
    log.debug(f"Arguments: {args}")

    return run_cli(args.func, args)


if __name__ == "__main__":
    sys.exit(main())
