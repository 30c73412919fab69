import calendar
import datetime

import pytest

from datetext.dates import (
    Date,
    DateCompare,
    age_in_days,
    business_days,
    day_of_week_order,
    day_short_name,
    days_in_month,
    days_in_year,
    hours_in_month,
    hours_in_year,
    is_leap_year,
    main,
    minutes_in_year,
    month_calendar,
    month_short_name,
    seconds_in_month,
    seconds_in_year,
    vacation_days,
    vacation_return_date,
    year_calendar,
)


def _as_py(date):
    return datetime.date(date.year, date.month, date.day)


def _from_py(value):
    return Date(value.day, value.month, value.year)


def _expected_order(value):
    return (value.weekday() + 1) % 7


def _next_weekday(order):
    value = datetime.date(2022, 1, 1)
    while _expected_order(value) != order:
        value += datetime.timedelta(days=1)
    return value


@pytest.mark.parametrize("text", ["31/1/2022", "2020/3/12", "1/12/1999"])
def test_parse_round_trip(text):
    assert str(Date.parse(text)) == text


def test_parse_fields():
    date = Date.parse("20/12/2022")
    assert (date.day, date.month, date.year) == (20, 12, 2022)


@pytest.mark.parametrize("text", ["12/3", "", "a/b/c"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Date.parse(text)


@pytest.mark.parametrize("year", [1900, 2000, 2020, 2021, 2023, 2024, 2100])
def test_is_leap_year_matches_calendar(year):
    assert is_leap_year(year) == calendar.isleap(year)
    assert Date(1, 1, year).is_leap_year() == calendar.isleap(year)


def test_days_in_year_values():
    assert days_in_year(2020) == 365
    assert days_in_year(2021) == 364


@pytest.mark.parametrize("year", [2020, 2021])
def test_year_unit_conversions(year):
    assert hours_in_year(year) == days_in_year(year) * 24
    assert minutes_in_year(year) == hours_in_year(year) * 60
    assert seconds_in_year(year) == minutes_in_year(year) * 60


@pytest.mark.parametrize("year", [1900, 2000, 2021, 2024])
def test_days_in_month_matches_calendar(year):
    for month in range(1, 13):
        assert days_in_month(month, year) == calendar.monthrange(year, month)[1]


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_invalid_month(month):
    assert days_in_month(month, 2022) == 0


def test_month_unit_conversions():
    assert hours_in_month(2, 2020) == 29 * 24
    assert seconds_in_month(4, 2022) == days_in_month(4, 2022) * 24 * 60 * 60


def test_day_of_week_order_matches_datetime():
    value = datetime.date(1999, 12, 1)
    for _ in range(800):
        assert day_of_week_order(value.day, value.month, value.year) == _expected_order(value)
        assert _from_py(value).day_of_week_order() == _expected_order(value)
        value += datetime.timedelta(days=3)


def test_day_short_names():
    assert [day_short_name(i) for i in range(7)] == [
        "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat",
    ]
    sunday = _from_py(_next_weekday(0))
    assert sunday.day_short_name() == "Sun"


@pytest.mark.parametrize("order", [-1, 7])
def test_day_short_name_out_of_range(order):
    with pytest.raises(ValueError):
        day_short_name(order)


def test_month_short_names():
    assert month_short_name(1) == "Jan"
    assert month_short_name(12) == "Dec"
    assert Date(5, 9, 2022).month_short_name() == "Sep"
    with pytest.raises(ValueError):
        month_short_name(13)


def test_month_calendar_layout():
    text = month_calendar(2, 2022)
    assert text.startswith(
        "\n  _______________Feb_______________\n\n  Sun  Mon  Tue  Wed  Thu  Fri  Sat\n"
    )
    assert text.endswith("\n  _________________________________\n")
    body = text.split("Sat\n", 1)[1].rsplit("\n  ___", 1)[0]
    numbers = [int(token) for token in body.split()]
    assert numbers == list(range(1, days_in_month(2, 2022) + 1))


def test_month_calendar_first_day_column():
    first = Date(1, 3, 2022)
    text = month_calendar(3, 2022)
    first_row = text.split("Sat\n", 1)[1].split("\n", 1)[0]
    assert first_row == " " * 5 * first.day_of_week_order() + f"{1:5d}" + first_row[
        5 * first.day_of_week_order() + 5:
    ]
    assert first_row.index("1") == 5 * first.day_of_week_order() + 4


def test_year_calendar_contents():
    text = year_calendar(2022)
    assert "           Calendar - 2022\n" in text
    for month in range(1, 13):
        assert month_calendar(month, 2022) in text


@pytest.mark.parametrize("year", [2020, 2022])
def test_from_day_of_year_round_trip(year):
    total = sum(days_in_month(m, year) for m in range(1, 13))
    for order in range(1, total + 1):
        date = Date.from_day_of_year(order, year)
        assert date.is_valid()
        assert date.day_of_year() == order


@pytest.mark.parametrize("order", [0, 366])
def test_from_day_of_year_out_of_range(order):
    with pytest.raises(ValueError):
        Date.from_day_of_year(order, 2022)


def test_is_valid():
    leap = next(y for y in range(2000, 2010) if calendar.isleap(y))
    common = next(y for y in range(2001, 2010) if not calendar.isleap(y))
    assert Date(29, 2, leap).is_valid()
    assert not Date(29, 2, common).is_valid()
    assert not Date(31, 4, 2022).is_valid()
    assert not Date(0, 1, 2022).is_valid()
    assert not Date(1, 13, 2022).is_valid()


@pytest.mark.parametrize("offset", [0, 1, 27, 59, 365, 1000, 4000])
def test_add_days_matches_datetime(offset):
    start = Date(28, 2, 2020)
    expected = _as_py(start) + datetime.timedelta(days=offset)
    assert start.add_days(offset) == _from_py(expected)


@pytest.mark.parametrize("offset", [1, 31, 400])
def test_subtract_days_matches_datetime(offset):
    start = Date(1, 3, 2021)
    expected = _as_py(start) - datetime.timedelta(days=offset)
    assert start.subtract_days(offset) == _from_py(expected)
    assert start.add_days(-offset) == start.subtract_days(offset)


def test_next_and_previous_day_are_inverse():
    date = Date(1, 1, 2023)
    for _ in range(400):
        following = date.next_day()
        assert _as_py(following) == _as_py(date) + datetime.timedelta(days=1)
        assert following.previous_day() == date
        date = following


def test_weeks_are_seven_days():
    start = Date(15, 6, 2022)
    assert start.add_weeks(3) == start.add_days(21)
    assert start.subtract_weeks(2) == start.subtract_days(14)


def test_add_month_clamps_day():
    assert str(Date(31, 1, 2022).add_months(1)) == "28/2/2022"


def test_subtract_month_clamps_day():
    assert str(Date(31, 3, 2022).subtract_months(1)) == "28/2/2022"


def test_month_steps_across_year():
    start = Date(15, 11, 2022)
    later = start.add_months(3)
    assert (later.month, later.year) == (2, 2023)
    assert later.subtract_months(3) == start
    assert start.add_months(-3) == start.subtract_months(3)


def test_years():
    start = Date(10, 5, 2022)
    assert start.add_years(10) == Date(10, 5, 2032)
    assert start.subtract_years(1000) == Date(10, 5, 1022)


def test_difference_in_days_matches_datetime():
    first = Date(6, 11, 1977)
    second = Date(20, 12, 2022)
    expected = (_as_py(second) - _as_py(first)).days
    assert first.difference_in_days(second) == expected
    assert second.difference_in_days(first) == -expected
    assert first.difference_in_days(second, include_end_day=True) == expected + 1
    assert second.difference_in_days(first, include_end_day=True) == -(expected + 1)


def test_difference_of_equal_dates():
    date = Date(1, 1, 2022)
    assert date.difference_in_days(date) == 0
    assert date.difference_in_days(date, include_end_day=True) == -1


def test_compare_and_ordering():
    early, late = Date(31, 12, 2021), Date(1, 1, 2022)
    assert early.compare(late) is DateCompare.BEFORE
    assert late.compare(early) is DateCompare.AFTER
    assert early.compare(Date(31, 12, 2021)) is DateCompare.EQUAL
    assert early < late
    assert sorted([late, early]) == [early, late]


def test_weekend_and_business_days():
    value = datetime.date(2022, 5, 1)
    for _ in range(14):
        date = _from_py(value)
        order = _expected_order(value)
        assert date.is_weekend() == (order in (5, 6))
        assert date.is_business_day() == (order not in (5, 6))
        assert date.is_end_of_week() == (order == 6)
        assert date.days_until_end_of_week() == 6 - order
        value += datetime.timedelta(days=1)


def test_last_day_in_month():
    assert Date(28, 2, 2022).is_last_day_in_month()
    assert not Date(28, 2, 2020).is_last_day_in_month()


def test_days_until_end_of_month_and_year():
    start = Date(1, 2, 2020)
    assert start.days_until_end_of_month() == days_in_month(2, 2020)
    first = Date(1, 1, 2021)
    expected = (datetime.date(2021, 12, 31) - datetime.date(2021, 1, 1)).days + 1
    assert first.days_until_end_of_year() == expected


def test_business_days_in_a_week():
    start = _from_py(datetime.date(2022, 3, 7))
    end = start.add_days(7)
    assert business_days(start, end) == 5
    assert vacation_days(start, end) == business_days(start, end)
    assert business_days(end, start) == 0


def test_vacation_return_date_without_weekend():
    sunday = _from_py(_next_weekday(0))
    assert vacation_return_date(sunday, 5) == sunday.add_days(5)


def test_vacation_return_date_adds_weekend_days():
    sunday = _from_py(_next_weekday(0))
    assert vacation_return_date(sunday, 7) == sunday.add_days(9)


def test_age_in_days():
    birth = Date.today().subtract_days(10)
    assert age_in_days(birth) == 11


def test_today_matches_system_date():
    assert _as_py(Date.today()) == datetime.date.today()


def test_main_prints_parsed_date(capsys):
    assert main(["2020/3/12"]) == 0
    assert capsys.readouterr().out == "2020/3/12\n"