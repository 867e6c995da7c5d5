"""Day-month-year dates and day-by-day arithmetic on them."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, replace
from functools import total_ordering

from .calendar_math import day_name, day_of_week_index, days_in_month, days_in_year


@total_ordering
@dataclass(frozen=True)
class Date:
    """A calendar date; fields are not validated, as in user-entered data."""

    day: int
    month: int
    year: int

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    def is_last_day_of_month(self) -> bool:
        return self.day == days_in_month(self.year, self.month)

    def is_last_month_of_year(self) -> bool:
        return self.month == 12

    def next_day(self) -> Date:
        """Return the following day, rolling over months and years."""
        if self.is_last_day_of_month():
            if self.is_last_month_of_year():
                return Date(1, 1, self.year + 1)
            return replace(self, day=1, month=self.month + 1)
        return replace(self, day=self.day + 1)

    def previous_day(self) -> Date:
        """Return the preceding day, rolling back months and years."""
        if self.day != 1:
            return replace(self, day=self.day - 1)
        if self.month == 1:
            year = self.year - 1
            return Date(days_in_month(year, 12), 12, year)
        month = self.month - 1
        return Date(days_in_month(self.year, month), month, self.year)

    def day_of_year(self) -> int:
        """Return the 1-based position of this date within its year."""
        return sum(days_in_month(self.year, m) for m in range(1, self.month)) + self.day

    def weekday_index(self) -> int:
        """Return 0 for Sunday through 6 for Saturday."""
        return day_of_week_index(self.year, self.month, self.day)

    def weekday_name(self) -> str:
        return day_name(self.weekday_index())


def add_days_from_day_of_year(day_number: int, added_days: int, year: int) -> Date:
    """Return the date ``added_days`` after day ``day_number`` of ``year``."""
    remaining = day_number + added_days
    if remaining < 1:
        raise ValueError(f"day number must be at least 1, got {remaining}")
    month = 1
    while remaining > (length := days_in_month(year, month)):
        remaining -= length
        month += 1
        if month > 12:
            month = 1
            year += 1
    return Date(remaining, month, year)


def date_from_day_of_year(day_number: int, year: int) -> Date:
    """Return the date that is day ``day_number`` (1-based) of ``year``."""
    if not 1 <= day_number <= days_in_year(year):
        raise ValueError(f"day {day_number} is outside year {year}")
    return add_days_from_day_of_year(day_number, 0, year)


def compare_dates(first: Date, second: Date) -> int:
    """Return 1 if ``first`` is after ``second``, -1 if before, 0 if equal."""
    if first > second:
        return 1
    if first < second:
        return -1
    return 0


def difference_in_days(start: Date, end: Date, include_end_day: bool = False) -> int:
    """Count the days from ``start`` up to ``end``; 0 if ``end`` is not later."""
    days = 0
    current = start
    while current < end:
        current = current.next_day()
        days += 1
    return days + 1 if include_end_day else days


def today() -> Date:
    """Return the current local date."""
    now = datetime.date.today()
    return Date(now.day, now.month, now.year)


def age_in_days(birth: Date, on: Date | None = None) -> int:
    """Return the age in days on ``on`` (default today), counting both ends."""
    return difference_in_days(birth, on if on is not None else today(), True)