import pytest

from datecraft.dates import Date
from datecraft.textformat import (
    DateFormat,
    format_date,
    is_valid_date,
    parse_date,
    split_string,
)


@pytest.mark.parametrize(
    "date, expected",
    [
        (Date(29, 2, 2020), True),
        (Date(29, 2, 2019), False),
        (Date(31, 4, 2021), False),
        (Date(30, 4, 2021), True),
        (Date(0, 5, 2021), False),
        (Date(1, 13, 2021), False),
        (Date(1, 0, 2021), False),
        (Date(31, 12, 1999), True),
    ],
)
def test_is_valid_date(date, expected):
    assert is_valid_date(date) is expected


def test_split_string_drops_empty_pieces():
    assert split_string("//a//b/", "/") == ["a", "b"]


def test_split_string_multichar_delimiter():
    assert split_string("1::2::3", "::") == ["1", "2", "3"]


def test_split_string_without_delimiter_present():
    assert split_string("word", ",") == ["word"]
    assert split_string("", ",") == []


def test_split_string_rejects_empty_delimiter():
    with pytest.raises(ValueError):
        split_string("abc", "")


def test_parse_date_default_delimiter():
    assert parse_date("25/12/2023") == Date(25, 12, 2023)


def test_parse_date_custom_delimiter():
    assert parse_date("1-2-2003", "-") == Date(1, 2, 2003)


def test_parse_date_needs_three_parts():
    with pytest.raises(ValueError):
        parse_date("25/12")


def test_parse_date_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse_date("aa/12/2023")


@pytest.mark.parametrize("date", [Date(1, 2, 2020), Date(31, 12, 1999), Date(9, 10, 11)])
def test_default_format_round_trips(date):
    assert parse_date(format_date(date)) == date
    assert parse_date(format_date(date, DateFormat.DAY_MONTH_YEAR, "."), ".") == date
    assert parse_date(format_date(date, DateFormat.DAY_MONTH_YEAR_DASHED), "-") == date


def test_format_styles_reorder_fields():
    date = Date(7, 8, 2009)
    year_first = parse_date(format_date(date, DateFormat.YEAR_DAY_MONTH))
    assert (year_first.day, year_first.month, year_first.year) == (2009, 7, 8)
    month_first = parse_date(format_date(date, 3))
    assert (month_first.day, month_first.month, month_first.year) == (8, 7, 2009)
    dashed = parse_date(format_date(date, DateFormat.MONTH_DAY_YEAR_DASHED), "-")
    assert dashed == month_first


def test_dashed_styles_ignore_delimiter():
    date = Date(7, 8, 2009)
    assert format_date(date, DateFormat.DAY_MONTH_YEAR_DASHED, "/") == format_date(
        date, DateFormat.DAY_MONTH_YEAR, "-"
    )


def test_labelled_format():
    assert format_date(Date(3, 4, 2005), DateFormat.LABELLED) == "Day:3, Month:4, Year:2005"


def test_unknown_style_raises():
    with pytest.raises(ValueError):
        format_date(Date(1, 1, 2000), 7)