"""Move dates forward or backward by days, weeks, months and years."""

from __future__ import annotations

from dataclasses import replace

from .calendar_math import days_in_month
from .dates import Date


def _clamp_day(date: Date) -> Date:
    """Pull the day back to the last day of the month when it overflows."""
    last = days_in_month(date.year, date.month)
    return replace(date, day=last) if date.day > last else date


def _next_month(date: Date) -> Date:
    if date.month == 12:
        date = replace(date, month=1, year=date.year + 1)
    else:
        date = replace(date, month=date.month + 1)
    return _clamp_day(date)


def _previous_month(date: Date) -> Date:
    if date.month == 1:
        date = replace(date, month=12, year=date.year - 1)
    else:
        date = replace(date, month=date.month - 1)
    return _clamp_day(date)


def add_days(date: Date, days: int) -> Date:
    """Return ``date`` moved ``days`` days forward; a count below 1 changes nothing."""
    for _ in range(days):
        date = date.next_day()
    return date


def add_weeks(date: Date, weeks: int) -> Date:
    """Return ``date`` moved ``weeks`` weeks forward."""
    for _ in range(weeks):
        date = add_days(date, 7)
    return date


def add_months(date: Date, months: int) -> Date:
    """Return ``date`` moved ``months`` months forward, clamping the day each step."""
    for _ in range(months):
        date = _next_month(date)
    return date


def add_years(date: Date, years: int) -> Date:
    """Return ``date`` with ``years`` added to its year; the day is kept as is."""
    return replace(date, year=date.year + years)


def add_decades(date: Date, decades: int) -> Date:
    return add_years(date, decades * 10)


def add_centuries(date: Date, centuries: int) -> Date:
    return add_years(date, centuries * 100)


def add_millennia(date: Date, millennia: int) -> Date:
    return add_years(date, millennia * 1000)


def subtract_days(date: Date, days: int) -> Date:
    """Return ``date`` moved ``days`` days back; a count below 1 changes nothing."""
    for _ in range(days):
        date = date.previous_day()
    return date


def subtract_weeks(date: Date, weeks: int) -> Date:
    """Return ``date`` moved ``weeks`` weeks back."""
    for _ in range(weeks):
        date = subtract_days(date, 7)
    return date


def subtract_months(date: Date, months: int) -> Date:
    """Return ``date`` moved ``months`` months back, clamping the day each step."""
    for _ in range(months):
        date = _previous_month(date)
    return date


def subtract_years(date: Date, years: int) -> Date:
    """Return ``date`` with ``years`` taken from its year; the day is kept as is."""
    return replace(date, year=date.year - years)


def subtract_decades(date: Date, decades: int) -> Date:
    return subtract_years(date, decades * 10)


def subtract_centuries(date: Date, centuries: int) -> Date:
    return subtract_years(date, centuries * 100)


def subtract_millennia(date: Date, millennia: int) -> Date:
    return subtract_years(date, millennia * 1000)