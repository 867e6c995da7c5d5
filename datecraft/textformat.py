"""Parsing, validating and formatting dates as text."""

from __future__ import annotations

import re
from enum import IntEnum

from .calendar_math import days_in_month
from .dates import Date

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class DateFormat(IntEnum):
    """Layouts understood by :func:`format_date`."""

    DAY_MONTH_YEAR = 1
    YEAR_DAY_MONTH = 2
    MONTH_DAY_YEAR = 3
    MONTH_DAY_YEAR_DASHED = 4
    DAY_MONTH_YEAR_DASHED = 5
    LABELLED = 6


def is_valid_date(date: Date) -> bool:
    """Return True if the month exists and the day lies within it."""
    last = days_in_month(date.year, date.month)
    return last != 0 and 0 < date.day <= last


def split_string(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim``, dropping empty pieces."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    return [word for word in text.split(delim) if word]


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def parse_date(text: str, delim: str = "/") -> Date:
    """Parse ``day<delim>month<delim>year`` into a :class:`Date`."""
    parts = split_string(text, delim)
    if len(parts) < 3:
        raise ValueError(f"expected day, month and year in {text!r}")
    day, month, year = (_to_int(part) for part in parts[:3])
    return Date(day, month, year)


def format_date(
    date: Date, style: DateFormat | int = DateFormat.DAY_MONTH_YEAR, delim: str = "/"
) -> str:
    """Render ``date`` in the given layout; dashed layouts ignore ``delim``."""
    style = DateFormat(style)
    d, m, y = date.day, date.month, date.year
    if style is DateFormat.DAY_MONTH_YEAR:
        return f"{d}{delim}{m}{delim}{y}"
    if style is DateFormat.YEAR_DAY_MONTH:
        return f"{y}{delim}{d}{delim}{m}"
    if style is DateFormat.MONTH_DAY_YEAR:
        return f"{m}{delim}{d}{delim}{y}"
    if style is DateFormat.MONTH_DAY_YEAR_DASHED:
        return f"{m}-{d}-{y}"
    if style is DateFormat.DAY_MONTH_YEAR_DASHED:
        return f"{d}-{m}-{y}"
    return f"Day:{d}, Month:{m}, Year:{y}"