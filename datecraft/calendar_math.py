"""Leap years, month lengths, durations and weekday arithmetic."""

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAY_NAMES = ("Sun", "Mon", "Tue", "Wend", "Thur", "Fri", "Sat")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_year(year: int) -> int:
    """Return the number of days in ``year``, summed over its months."""
    return sum(days_in_month(year, month) for month in range(1, 13))


def hours_in_year(year: int) -> int:
    return days_in_year(year) * 24


def minutes_in_year(year: int) -> int:
    return hours_in_year(year) * 60


def seconds_in_year(year: int) -> int:
    return minutes_in_year(year) * 60


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``; 0 for an invalid month."""
    if not 1 <= month <= 12:
        return 0
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _MONTH_DAYS[month - 1]


def hours_in_month(year: int, month: int) -> int:
    return days_in_month(year, month) * 24


def minutes_in_month(year: int, month: int) -> int:
    return hours_in_month(year, month) * 60


def seconds_in_month(year: int, month: int) -> int:
    return minutes_in_month(year, month) * 60


def day_of_week_index(year: int, month: int, day: int) -> int:
    """Return the weekday of a date, 0 for Sunday through 6 for Saturday."""
    a = (14 - month) // 12
    y = year - a
    m = month + 12 * a - 2
    return (day + y + y // 4 - y // 100 + y // 400 + (31 * m) // 12) % 7


def day_name(index: int) -> str:
    """Return the short name of weekday ``index`` (0 is Sunday)."""
    if not 0 <= index < len(_DAY_NAMES):
        raise ValueError(f"weekday index out of range: {index}")
    return _DAY_NAMES[index]


def month_name(month: int) -> str:
    """Return the short name of ``month`` (1 is January)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    return _MONTH_NAMES[month - 1]