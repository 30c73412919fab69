import pytest

from datetext.dates import Date
from datetext.period import Period


def _period(start, end):
    return Period(Date.parse(start), Date.parse(end))


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (("1/1/2022", "10/1/2022"), ("5/1/2022", "20/1/2022"), True),
        (("1/1/2022", "10/1/2022"), ("11/1/2022", "20/1/2022"), False),
        (("11/1/2022", "20/1/2022"), ("1/1/2022", "10/1/2022"), False),
        (("1/1/2022", "10/1/2022"), ("10/1/2022", "20/1/2022"), True),
        (("1/1/2022", "31/12/2022"), ("5/5/2022", "6/5/2022"), True),
        (("5/5/2022", "6/5/2022"), ("1/1/2022", "31/12/2022"), True),
    ],
)
def test_overlaps(first, second, expected):
    assert _period(*first).overlaps(_period(*second)) is expected


def test_overlap_is_symmetric():
    a = _period("1/3/2021", "15/3/2021")
    b = _period("10/3/2021", "1/4/2021")
    c = _period("2/4/2021", "9/4/2021")
    assert a.overlaps(b) == b.overlaps(a)
    assert a.overlaps(c) == c.overlaps(a)
    assert b.overlaps(c) == c.overlaps(b)


def test_period_overlaps_itself():
    p = _period("7/7/2020", "7/7/2020")
    assert p.overlaps(p) is True


def test_describe_lists_start_and_end():
    p = _period("1/2/2022", "28/2/2022")
    lines = p.describe().splitlines()
    assert lines == ["Period Start: 1/2/2022", "Period End: 28/2/2022"]


def test_fields_kept():
    start = Date(3, 4, 2020)
    end = Date(9, 4, 2020)
    p = Period(start, end)
    assert p.start == start
    assert p.end == end