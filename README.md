# datecraft

Small, dependency-free date utilities built on a plain day/month/year
calendar model.

- `datecraft.calendar_math`: leap years; days, hours, minutes and seconds in
  a year or a month; weekday index (0 = Sunday … 6 = Saturday); short day
  and month names
- `datecraft.calendar_view`: printable month and year calendars
- `datecraft.dates`: the `Date` type (next/previous day, day of year,
  weekday), comparing dates, counting the days between them, age in days
- `datecraft.shifting`: moving dates by days, weeks, months, years,
  decades, centuries and millennia, forward or back
- `datecraft.textformat`: validating, splitting, parsing and formatting
  dates as text (`DateFormat` layouts)
- `datecraft.workdays`: weekends, business days, days left in the week,
  month or year; vacation length and return date
- `datecraft.periods`: the `Period` type with length, containment, overlap
  and overlapping days
- `datecraft.numtext`: spelling non-negative integers out in English words

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `datecraft` command with three
subcommands:

```
datecraft calendar [YEAR] [--month 1-12]   # a whole year, or one month of it
datecraft age [DD/MM/YYYY] [--on DD/MM/YYYY]  # age in days, both ends counted
datecraft formats [DD/MM/YYYY]              # the date in every DateFormat layout
```

When the year or date argument is left out, it is asked for on standard
input. Invalid dates are rejected with a usage error. See
`datecraft --help` for details.

## Library use

```python
from datecraft.calendar_math import is_leap_year, days_in_month, month_name
from datecraft.numtext import number_to_text
from datecraft.calendar_view import month_calendar

is_leap_year(2024)          # True
days_in_month(2024, 2)      # 29
days_in_month(2024, 13)     # 0 (no such month)
month_name(3)               # "Mar"
number_to_text(21)          # "Twenty One"

print(month_calendar(2, 2024))
```

Working with dates and periods:

```python
from datecraft.dates import Date, compare_dates, difference_in_days
from datecraft.shifting import add_months, subtract_days
from datecraft.textformat import DateFormat, parse_date, format_date
from datecraft.periods import Period
from datecraft.workdays import is_weekend, vacation_return_date

start = parse_date("31/1/2024", "/")     # Date(day=31, month=1, year=2024)
later = add_months(start, 1)             # 29/2/2024, clamped to the month's end
compare_dates(start, later)              # -1
difference_in_days(start, later)         # 29
format_date(start, DateFormat.MONTH_DAY_YEAR_DASHED)  # "1-31-2024"

earlier = subtract_days(start, 10)       # 21/1/2024
is_weekend(start)                        # False (a Wednesday)
vacation_return_date(start, 5)

Period(Date(1, 1, 2024), Date(10, 1, 2024)).overlap_days(
    Period(Date(5, 1, 2024), Date(20, 1, 2024))
)                                        # 6
```

## Behaviour worth knowing

- `Date` does not validate its fields; use `textformat.is_valid_date` for
  that. Dates order by year, then month, then day.
- Shifting by months clamps the day to the last day of the target month at
  every step. Shifting by years (and decades, centuries, millennia) only
  changes the year, so 29/2 may become a date that does not exist.
- `difference_in_days` returns 0 when the end is not after the start;
  `include_end_day=True` adds one.
- `is_weekend` means Saturday or Sunday, while the vacation functions
  (`actual_vacation_days`, `vacation_return_date`) treat Friday and
  Saturday as days off. `days_until_end_of_week` counts to Saturday.
- Names are spelled as the package has them: weekdays are `Sun`, `Mon`,
  `Tue`, `Wend`, `Thur`, `Fri`, `Sat`; `number_to_text` writes `Eghit` and
  `Thausand(s)`, returns a single space for 0 and leaves the spacing of
  joined parts as it is (e.g. `number_to_text(20)` ends in spaces).

## What it does not do

There are no time-of-day values or time zones, and no storage: the
command line only prints calendars, ages and formatted dates. Everything
else is available from the library modules.