import pytest

from datecraft.calendar_math import days_in_month, days_in_year
from datecraft.dates import Date
from datecraft.shifting import add_days
from datecraft.workdays import (
    actual_vacation_days,
    days_until_end_of_month,
    days_until_end_of_week,
    days_until_end_of_year,
    is_business_day,
    is_end_of_week,
    is_weekend,
    vacation_return_date,
)

WEEK = [add_days(Date(10, 3, 2024), offset) for offset in range(7)]
STARTS = [Date(1, 1, 2024), Date(15, 6, 2023), Date(28, 2, 2024), Date(27, 12, 2021)]


@pytest.mark.parametrize("date", WEEK)
def test_weekend_matches_weekday_index(date):
    assert is_weekend(date) == (date.weekday_index() in (0, 6))


@pytest.mark.parametrize("date", WEEK)
def test_business_day_is_opposite_of_weekend(date):
    assert is_business_day(date) == (not is_weekend(date))


@pytest.mark.parametrize("date", WEEK)
def test_end_of_week_is_sunday(date):
    assert is_end_of_week(date) == (date.weekday_name() == "Sun")


def test_one_week_has_two_weekend_days():
    assert sum(is_weekend(d) for d in WEEK) == 2


@pytest.mark.parametrize("date", WEEK)
def test_days_until_end_of_week(date):
    assert days_until_end_of_week(date) + date.weekday_index() == 6


@pytest.mark.parametrize("month", range(1, 13))
def test_days_until_end_of_month_from_first_day(month):
    assert days_until_end_of_month(Date(1, month, 2024)) == days_in_month(2024, month)


@pytest.mark.parametrize("month", range(1, 13))
def test_days_until_end_of_month_on_last_day(month):
    last = Date(days_in_month(2023, month), month, 2023)
    assert days_until_end_of_month(last) == 1


@pytest.mark.parametrize("year", [2023, 2024, 1900, 2000])
def test_days_until_end_of_year_from_new_year(year):
    assert days_until_end_of_year(Date(1, 1, year)) == days_in_year(year)


def test_days_until_end_of_year_on_last_day():
    assert days_until_end_of_year(Date(31, 12, 2022)) == 1


@pytest.mark.parametrize("start", STARTS)
def test_actual_vacation_days_empty_range(start):
    assert actual_vacation_days(start, start) == 0


@pytest.mark.parametrize("start", STARTS)
def test_actual_vacation_days_per_week(start):
    assert actual_vacation_days(start, add_days(start, 7)) == 5
    assert actual_vacation_days(start, add_days(start, 14)) == 10


@pytest.mark.parametrize("start", STARTS)
def test_actual_vacation_days_reversed_range(start):
    assert actual_vacation_days(add_days(start, 10), start) == 0


@pytest.mark.parametrize("start", STARTS)
@pytest.mark.parametrize("days", [0, 1, 4, 9, 30])
def test_vacation_return_date_round_trip(start, days):
    back = vacation_return_date(start, days)
    assert back.weekday_index() not in (5, 6)
    assert back >= start
    assert actual_vacation_days(start, back) == days


def test_vacation_return_date_zero_days_on_working_day():
    start = next(d for d in WEEK if d.weekday_index() not in (5, 6))
    assert vacation_return_date(start, 0) == start