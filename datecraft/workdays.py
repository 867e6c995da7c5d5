"""Weekends, business days, days left in a period and vacation arithmetic."""

from __future__ import annotations

from .dates import Date, difference_in_days

_SUNDAY = 0
_SATURDAY = 6
# Vacation counting treats Friday and Saturday as the days off.
_VACATION_DAYS_OFF = frozenset({5, 6})


def is_end_of_week(date: Date) -> bool:
    """Return True if ``date`` falls on a Sunday."""
    return date.weekday_index() == _SUNDAY


def is_weekend(date: Date) -> bool:
    """Return True if ``date`` falls on a Saturday or a Sunday."""
    return date.weekday_index() in (_SATURDAY, _SUNDAY)


def is_business_day(date: Date) -> bool:
    """Return True if ``date`` falls on Monday through Friday."""
    return not is_weekend(date)


def days_until_end_of_week(date: Date) -> int:
    """Return the days left until Saturday, the last weekday index."""
    return _SATURDAY - date.weekday_index()


def days_until_end_of_month(date: Date) -> int:
    """Return the days from ``date`` to the month's last day, both included."""
    end = Date(date.day if date.is_last_day_of_month() else 0, date.month, date.year)
    end = Date(_month_length(date), date.month, date.year)
    return difference_in_days(date, end, True)


def days_until_end_of_year(date: Date) -> int:
    """Return the days from ``date`` to 31 December, both included."""
    return difference_in_days(date, Date(31, 12, date.year), True)


def _month_length(date: Date) -> int:
    from .calendar_math import days_in_month

    return days_in_month(date.year, date.month)


def _is_vacation_day_off(date: Date) -> bool:
    return date.weekday_index() in _VACATION_DAYS_OFF


def _days_between(start: Date, end: Date):
    current = start
    while current < end:
        yield current
        current = current.next_day()


def actual_vacation_days(start: Date, end: Date) -> int:
    """Count the working days from ``start`` up to, but not including, ``end``."""
    return sum(1 for day in _days_between(start, end) if not _is_vacation_day_off(day))


def vacation_return_date(start: Date, vacation_days: int) -> Date:
    """Return the first working day after ``vacation_days`` working days off."""
    remaining = vacation_days
    current = start
    while remaining > 0:
        if not _is_vacation_day_off(current):
            remaining -= 1
        current = current.next_day()
    while _is_vacation_day_off(current):
        current = current.next_day()
    return current