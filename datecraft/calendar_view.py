"""Text rendering of month and year calendars."""

from .calendar_math import day_of_week_index, days_in_month, month_name

_RULE = " __________________________________"


def month_calendar(month: int, year: int) -> str:
    """Return a text calendar for one month, weeks starting on Sunday."""
    header = f"\n ________________{month_name(month)}_______________\n\n"
    parts = [header, "  Sun  Mon  Tue  Wed  Thu  Fri  Sat\n"]

    column = day_of_week_index(year, month, 1)
    parts.append("     " * column)
    for day in range(1, days_in_month(year, month) + 1):
        parts.append(f"{day:5d}")
        column += 1
        if column == 7:
            column = 0
            parts.append("\n")

    parts.append(f"\n{_RULE}\n")
    return "".join(parts)


def year_calendar(year: int) -> str:
    """Return a text calendar for all twelve months of ``year``."""
    header = f"{_RULE}\n\n         Calander :- {year}\n{_RULE}\n"
    return header + "".join(month_calendar(month, year) for month in range(1, 13))