# datetext

A small library with no dependencies, in three parts:

- `datetext.textops`: string helpers that work on words and letters. They count
  words, letters and vowels, change case, split and join, trim spaces, reverse
  and replace words, and remove punctuation.
- `datetext.dates`: a frozen `Date` type for day/month/year arithmetic on the
  Gregorian calendar. It comes with helpers for leap years, month lengths,
  weekdays, text calendars, business days and vacation planning.
- `datetext.period`, `datetext.people` and `datetext.address`: plain records for
  date periods (with an overlap check), persons, employees, developers and
  postal addresses. Each record can render a text card.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Text helpers

```python
from datetext import textops

textops.count_words("Sam  Lee Rivers")                 # 3
textops.trim("    Sam Rivers     ")                    # "Sam Rivers"
textops.split("Welcome to Jordan", " ")                # ["Welcome", "to", "Jordan"]
textops.reverse_words("one two three")                 # "three two one"
textops.replace_word("Sam Lee", "sam", "Ann", False)   # "Ann Lee"
textops.is_vowel("a")                                  # True
```

A word is anything between single space characters. `split` drops empty
pieces, so repeated delimiters never produce empty words. An empty delimiter
raises `ValueError`. `replace_word` rebuilds the text from its words, so runs
of spaces collapse into one.

The case helpers act only on ASCII letters: `upper_first_letter_of_each_word`,
`lower_first_letter_of_each_word`, `invert_letter_case` and
`invert_all_letters_case`. `count_letters` takes a `WhatToCount` value:
`SMALL_LETTERS`, `CAPITAL_LETTERS` or `ALL`. `ALL`, the default, counts every
character. Functions that take a single character (`invert_letter_case`,
`is_vowel`, and the `letter` argument of `count_specific_letter`) raise
`ValueError` when given anything else.

## Dates

```python
from datetext.dates import Date, is_leap_year, days_in_month, year_calendar

d = Date.parse("31/1/2022")      # day/month/year
d.is_valid()                     # True
d.day_short_name()               # "Mon"
d.add_months(1)                  # Date(day=28, month=2, year=2022)
str(d.add_days(1))               # "1/2/2022"

is_leap_year(2024)               # True
days_in_month(2, 2023)           # 28
print(year_calendar(2024))       # a text calendar for all twelve months
```

`Date` objects are immutable. Every arithmetic method returns a new date:

- Creating a date: `Date.today()`, `Date.parse(text)` and
  `Date.from_day_of_year(order, year)`. `from_day_of_year` raises `ValueError`
  when the day number is outside the year.
- Moving forward: `add_days`, `add_weeks`, `add_months`, `add_years` and
  `next_day`.
- Moving back: `subtract_days`, `subtract_weeks`, `subtract_months`,
  `subtract_years` and `previous_day`.
- Month steps clamp the day to the length of the target month.

Dates order by year, month and day, and can be compared with the usual
operators. `compare(other)` returns a `DateCompare` value: `BEFORE`, `EQUAL` or
`AFTER`.

`difference_in_days(other, include_end_day=False)` gives a count of days. The
count is positive only when this date is strictly earlier than `other`.
`include_end_day` adds one to the count before the sign is applied, so equal
dates then give `-1`.

Weekdays are numbered from 0 (Sunday) to 6 (Saturday), and weekends are
Friday and Saturday. The related methods are `is_weekend`, `is_business_day`,
`is_end_of_week` and `days_until_end_of_week`. The following count days
inclusively: `days_until_end_of_month`, `days_until_end_of_year`, and
`age_in_days(birth)`, which counts up to today.

Module-level helpers:

- Month and weekday: `days_in_month` (0 for a month outside 1-12),
  `hours_in_month`, `minutes_in_month`, `seconds_in_month`,
  `day_of_week_order`, `day_short_name` and `month_short_name`.
- Text calendars: `month_calendar` and `year_calendar`.
- Business days and vacations: `business_days(start, end)` counts business
  days from `start` up to but not including `end`. `vacation_days` does the
  same. `vacation_return_date(start, days)` adds `days` calendar days, plus one
  more day for every weekend day met along the way.

The per-year counters `days_in_year`, `hours_in_year`, `minutes_in_year` and
`seconds_in_year` count one day fewer than the calendar holds: `days_in_year`
returns 365 for a leap year and 364 otherwise.

## Records

`datetext.period.Period(start, end)` holds two dates, with both days included.
`overlaps(other)` tells whether two periods share at least one day.
`describe()` returns the start and end as two labelled lines.

`datetext.people` provides three dataclasses, each with a `card()` method that
renders its details:

- `Person`: the `id` cannot be reassigned once set.
- `Employee`: adds a title, a department and a salary.
- `Developer`: adds a main programming language.

`send_email(subject, body)` and `send_sms(text)` return the confirmation text
for a message to the person's address or phone, for example
`someone@example.com`.

`datetext.address.Address` holds two address lines, a PO box and a zip code,
and also has a `card()` method.

## What it does not do

`send_email` and `send_sms` only build confirmation text. No message is sent.
Records live only in memory: nothing is stored or loaded.

## Commands

```
datetext-date [DATE]
```

Parses `DATE`, given as day/month/year, and prints it back in the same form.
Without an argument it prints today's date.

```
datetext-people
```

Prints the card of a sample developer and the confirmation of an SMS sent to
them.