"""Command line entry point: calendars, age in days and date formats."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from .calendar_view import month_calendar, year_calendar
from .dates import Date, age_in_days
from .textformat import DateFormat, format_date, is_valid_date, parse_date

_DATE_PROMPT = "Please enter Date dd/mm/yyyy? "
_YEAR_PROMPT = "please enter a Year? "


def _to_date(text: str) -> Date:
    date = parse_date(text)
    if not is_valid_date(date):
        raise ValueError(f"not a valid date: {text!r}")
    return date


def _date_arg(text: str) -> Date:
    try:
        return _to_date(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _ask(parser: argparse.ArgumentParser, prompt: str, convert: Callable):
    """Read a value from the user, turning bad input into a usage error."""
    try:
        return convert(input(prompt).strip())
    except ValueError as exc:
        parser.error(str(exc))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datecraft", description="Calendar and date utilities."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    cal = commands.add_parser("calendar", help="print a year or month calendar")
    cal.add_argument("year", nargs="?", type=int, help="year to show")
    cal.add_argument(
        "--month", type=int, choices=range(1, 13), metavar="1-12",
        help="show only this month",
    )

    age = commands.add_parser("age", help="print an age in days")
    age.add_argument("birth", nargs="?", type=_date_arg, help="birth date dd/mm/yyyy")
    age.add_argument(
        "--on", type=_date_arg, default=None,
        help="date to measure the age on (default: today)",
    )

    fmt = commands.add_parser("formats", help="print a date in every layout")
    fmt.add_argument("date", nargs="?", type=_date_arg, help="date dd/mm/yyyy")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "calendar":
        year = args.year if args.year is not None else _ask(parser, _YEAR_PROMPT, int)
        if args.month is not None:
            print(month_calendar(args.month, year), end="")
        else:
            print(year_calendar(year), end="")
    elif args.command == "age":
        birth = args.birth if args.birth is not None else _ask(parser, _DATE_PROMPT, _to_date)
        print(f"Your Age is : {age_in_days(birth, args.on)} Day(s)")
    else:
        date = args.date if args.date is not None else _ask(parser, _DATE_PROMPT, _to_date)
        for style in DateFormat:
            print(format_date(date, style))
    return 0