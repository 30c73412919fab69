"""Calendar dates with day, month and year fields and the arithmetic around them.

Weekends are Friday and Saturday. Day-of-week orders run from 0 (Sunday)
to 6 (Saturday).
"""

from __future__ import annotations

import argparse
import datetime
import functools
from dataclasses import dataclass, replace
from enum import Enum

from datetext.textops import split

__all__ = [
    "DateCompare",
    "Date",
    "is_leap_year",
    "days_in_year",
    "hours_in_year",
    "minutes_in_year",
    "seconds_in_year",
    "days_in_month",
    "hours_in_month",
    "minutes_in_month",
    "seconds_in_month",
    "day_of_week_order",
    "day_short_name",
    "month_short_name",
    "month_calendar",
    "year_calendar",
    "business_days",
    "vacation_days",
    "vacation_return_date",
    "age_in_days",
    "main",
]

_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_WEEKEND = frozenset({5, 6})
_RULE = "  _________________________________\n"


class DateCompare(Enum):
    """Result of comparing one date with another."""

    BEFORE = -1
    EQUAL = 0
    AFTER = 1


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    """Return the year length used by the per-year counters: 365 if leap, else 364.

    The counters count one day fewer than the calendar holds.
    """
    calendar_days = sum(days_in_month(month, year) for month in range(1, 13))
    return calendar_days - 1


def hours_in_year(year: int) -> int:
    """Return :func:`days_in_year` expressed in hours."""
    return days_in_year(year) * 24


def minutes_in_year(year: int) -> int:
    """Return :func:`hours_in_year` expressed in minutes."""
    return hours_in_year(year) * 60


def seconds_in_year(year: int) -> int:
    """Return :func:`minutes_in_year` expressed in seconds."""
    return minutes_in_year(year) * 60


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month``, or 0 for a month outside 1-12."""
    if not 1 <= month <= 12:
        return 0
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _MONTH_DAYS[month - 1]


def hours_in_month(month: int, year: int) -> int:
    """Return the length of ``month`` in hours."""
    return days_in_month(month, year) * 24


def minutes_in_month(month: int, year: int) -> int:
    """Return the length of ``month`` in minutes."""
    return hours_in_month(month, year) * 60


def seconds_in_month(month: int, year: int) -> int:
    """Return the length of ``month`` in seconds."""
    return minutes_in_month(month, year) * 60


def day_of_week_order(day: int, month: int, year: int) -> int:
    """Return the weekday of a Gregorian date, 0 for Sunday through 6 for Saturday."""
    a = (14 - month) // 12
    y = year - a
    m = month + 12 * a - 2
    return (day + y + y // 4 - y // 100 + y // 400 + (31 * m) // 12) % 7


def day_short_name(order: int) -> str:
    """Return the three-letter name of a weekday order."""
    if not 0 <= order <= 6:
        raise ValueError(f"day of week order must be 0-6, got {order}")
    return _DAY_NAMES[order]


def month_short_name(month: int) -> str:
    """Return the three-letter name of a month number."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return _MONTH_NAMES[month - 1]


def month_calendar(month: int, year: int) -> str:
    """Render one month as a text calendar with Sunday-first columns."""
    parts = [
        f"\n  _______________{month_short_name(month)}_______________\n\n",
        "  Sun  Mon  Tue  Wed  Thu  Fri  Sat\n",
    ]
    column = day_of_week_order(1, month, year)
    parts.append("     " * column)
    for day in range(1, days_in_month(month, year) + 1):
        parts.append(f"{day:5d}")
        column += 1
        if column == 7:
            column = 0
            parts.append("\n")
    parts.append("\n" + _RULE)
    return "".join(parts)


def year_calendar(year: int) -> str:
    """Render all twelve months of ``year`` under a title."""
    header = f"\n{_RULE}\n           Calendar - {year}\n{_RULE}"
    return header + "".join(month_calendar(m, year) for m in range(1, 13))


def _ordinal(date: Date) -> int:
    previous = date.year - 1
    return (
        365 * previous
        + previous // 4
        - previous // 100
        + previous // 400
        + date.day_of_year()
    )


@functools.total_ordering
@dataclass(frozen=True)
class Date:
    """A day, month and year; arithmetic returns new dates."""

    day: int
    month: int
    year: int

    @classmethod
    def today(cls) -> Date:
        """Return the local system date."""
        now = datetime.date.today()
        return cls(now.day, now.month, now.year)

    @classmethod
    def parse(cls, text: str) -> Date:
        """Build a date from ``day/month/year`` text."""
        parts = split(text, "/")
        if len(parts) < 3:
            raise ValueError(f"expected day/month/year, got {text!r}")
        try:
            day, month, year = (int(p) for p in parts[:3])
        except ValueError as exc:
            raise ValueError(f"expected day/month/year, got {text!r}") from exc
        return cls(day, month, year)

    @classmethod
    def from_day_of_year(cls, order: int, year: int) -> Date:
        """Return the date that is day number ``order`` of ``year`` (1-based)."""
        total = sum(days_in_month(m, year) for m in range(1, 13))
        if not 1 <= order <= total:
            raise ValueError(f"day of year must be 1-{total}, got {order}")
        month = 1
        remaining = order
        while remaining > (length := days_in_month(month, year)):
            remaining -= length
            month += 1
        return cls(remaining, month, year)

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def is_valid(self) -> bool:
        """Return True if the day and month exist in this year."""
        if not 1 <= self.month <= 12:
            return False
        return 1 <= self.day <= days_in_month(self.month, self.year)

    def is_leap_year(self) -> bool:
        """Return True if this date's year is a leap year."""
        return is_leap_year(self.year)

    def day_of_week_order(self) -> int:
        """Return the weekday, 0 for Sunday through 6 for Saturday."""
        return day_of_week_order(self.day, self.month, self.year)

    def day_short_name(self) -> str:
        """Return the three-letter weekday name."""
        return day_short_name(self.day_of_week_order())

    def month_short_name(self) -> str:
        """Return the three-letter month name."""
        return month_short_name(self.month)

    def day_of_year(self) -> int:
        """Return the 1-based position of this date within its year."""
        return sum(days_in_month(m, self.year) for m in range(1, self.month)) + self.day

    def add_days(self, days: int) -> Date:
        """Return the date ``days`` days later."""
        if days < 0:
            return self.subtract_days(-days)
        remaining = days + self.day_of_year()
        month, year = 1, self.year
        while remaining > (length := days_in_month(month, year)):
            remaining -= length
            month += 1
            if month > 12:
                month = 1
                year += 1
        return Date(remaining, month, year)

    def next_day(self) -> Date:
        """Return the following day."""
        if self.is_last_day_in_month():
            if self.month == 12:
                return Date(1, 1, self.year + 1)
            return Date(1, self.month + 1, self.year)
        return replace(self, day=self.day + 1)

    def previous_day(self) -> Date:
        """Return the preceding day."""
        if self.day == 1:
            if self.month == 1:
                return Date(31, 12, self.year - 1)
            month = self.month - 1
            return Date(days_in_month(month, self.year), month, self.year)
        return replace(self, day=self.day - 1)

    def add_weeks(self, weeks: int) -> Date:
        """Return the date ``weeks`` weeks later."""
        return self.add_days(7 * weeks)

    def add_months(self, months: int) -> Date:
        """Step forward month by month, clamping the day to each month's length."""
        if months < 0:
            return self.subtract_months(-months)
        date = self
        for _ in range(months):
            month, year = date.month + 1, date.year
            if month > 12:
                month, year = 1, year + 1
            date = Date(min(date.day, days_in_month(month, year)), month, year)
        return date

    def add_years(self, years: int) -> Date:
        """Return the same day and month ``years`` years later."""
        return replace(self, year=self.year + years)

    def subtract_days(self, days: int) -> Date:
        """Return the date ``days`` days earlier."""
        if days < 0:
            return self.add_days(-days)
        date = self
        for _ in range(days):
            date = date.previous_day()
        return date

    def subtract_weeks(self, weeks: int) -> Date:
        """Return the date ``weeks`` weeks earlier."""
        return self.subtract_days(7 * weeks)

    def subtract_months(self, months: int) -> Date:
        """Step back month by month, clamping the day to each month's length."""
        if months < 0:
            return self.add_months(-months)
        date = self
        for _ in range(months):
            month, year = date.month - 1, date.year
            if month < 1:
                month, year = 12, year - 1
            date = Date(min(date.day, days_in_month(month, year)), month, year)
        return date

    def subtract_years(self, years: int) -> Date:
        """Return the same day and month ``years`` years earlier."""
        return replace(self, year=self.year - years)

    def difference_in_days(self, other: Date, include_end_day: bool = False) -> int:
        """Return the signed day count from this date to ``other``.

        The result is positive only when this date is strictly earlier; with
        ``include_end_day`` one is added to the count before the sign is applied,
        so equal dates give -1.
        """
        days = abs(_ordinal(other) - _ordinal(self))
        sign = 1 if self < other else -1
        if include_end_day:
            days += 1
        return days * sign

    def compare(self, other: Date) -> DateCompare:
        """Return whether this date is before, equal to or after ``other``."""
        if self < other:
            return DateCompare.BEFORE
        if self == other:
            return DateCompare.EQUAL
        return DateCompare.AFTER

    def is_last_day_in_month(self) -> bool:
        """Return True on the last day of the month."""
        return self.day == days_in_month(self.month, self.year)

    def is_end_of_week(self) -> bool:
        """Return True on Saturday."""
        return self.day_of_week_order() == 6

    def is_weekend(self) -> bool:
        """Return True on Friday and Saturday."""
        return self.day_of_week_order() in _WEEKEND

    def is_business_day(self) -> bool:
        """Return True on Sunday through Thursday."""
        return not self.is_weekend()

    def days_until_end_of_week(self) -> int:
        """Return the days left until Saturday."""
        return 6 - self.day_of_week_order()

    def days_until_end_of_month(self) -> int:
        """Return the inclusive day count to the end of the month."""
        end = Date(days_in_month(self.month, self.year), self.month, self.year)
        return self.difference_in_days(end, include_end_day=True)

    def days_until_end_of_year(self) -> int:
        """Return the inclusive day count to 31 December."""
        return self.difference_in_days(Date(31, 12, self.year), include_end_day=True)


def business_days(start: Date, end: Date) -> int:
    """Count business days from ``start`` up to, not including, ``end``."""
    count = 0
    while start < end:
        if start.is_business_day():
            count += 1
        start = start.next_day()
    return count


def vacation_days(start: Date, end: Date) -> int:
    """Return the business days a vacation from ``start`` to ``end`` consumes."""
    return business_days(start, end)


def vacation_return_date(start: Date, days: int) -> Date:
    """Return the date after ``days`` calendar days plus one extra day per weekend day."""
    date = start
    weekend_days = 0
    for _ in range(days):
        if date.is_weekend():
            weekend_days += 1
        date = date.next_day()
    return date.add_days(weekend_days)


def age_in_days(birth: Date) -> int:
    """Return the inclusive number of days from ``birth`` to today."""
    return birth.difference_in_days(Date.today(), include_end_day=True)


def main(argv: list[str] | None = None) -> int:
    """Parse a day/month/year date and print it back."""
    parser = argparse.ArgumentParser(description="Parse and print a day/month/year date.")
    parser.add_argument("date", nargs="?", help="date as day/month/year (default: today)")
    args = parser.parse_args(argv)
    date = Date.parse(args.date) if args.date else Date.today()
    print(date)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())