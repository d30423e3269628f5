# tests/test_dates.py

import random

from campcal.core.types import CalendarDate, CalendarDefinition, CalendarMonth
from campcal.engines.dates import (
    format_date,
    format_date_canonical,
    month_display_name,
    parse_date,
    year_display_name,
)

CAL = CalendarDefinition(
    name="two-month",
    months=(CalendarMonth("Jan", 31), CalendarMonth("Feb", 28)),
    weekdays=("Mon", "Tue", "Wed"),
    years={1: "First Age"},
    month_aliases={2: "Frostmoot"},
    suffix="AE",
)


def test_parse_date_valid():
    assert parse_date("1372-3-15") == CalendarDate(1372, 3, 15)
    assert parse_date("1372-03-05") == CalendarDate(1372, 3, 5)
    assert parse_date("-45-01-02") == CalendarDate(-45, 1, 2)
    assert parse_date("0-1-1") == CalendarDate(0, 1, 1)


def test_parse_date_invalid():
    for s in [None, "", "abc", "1-2", "1-2-3-4", "123456-1-1", "1-123-1", "1-1-123",
              "1--1-1", "--1-1-1", " 1-1-1", "1-1-1 ", "1-1-1\n", "１-1-1", "1.5-1-1"]:
        assert parse_date(s) is None, s


def test_canonical_format_pads_month_and_day():
    assert format_date_canonical(CalendarDate(1372, 12, 1)) == "1372-12-01"
    assert format_date_canonical(CalendarDate(-5, 3, 7)) == "-5-03-07"


def test_canonical_round_trip():
    random.seed(7)
    for _ in range(2000):
        d = CalendarDate(random.randint(-99999, 99999), random.randint(1, 99), random.randint(1, 99))
        assert parse_date(format_date_canonical(d)) == d


def test_format_date_uses_year_name_and_suffix():
    assert format_date(CalendarDate(1, 2, 2), CAL) == "2 Feb, First Age AE"
    assert format_date(CalendarDate(3, 1, 9), CAL) == "9 Jan, 3 AE"

    plain = CAL.tweak(suffix=None, years={})
    assert format_date(CalendarDate(3, 1, 9), plain) == "9 Jan, 3"


def test_format_date_month_out_of_range():
    assert format_date(CalendarDate(1, 3, 5), CAL.tweak(suffix=None)) == "5 3, First Age"


def test_month_display_name_prefers_alias():
    assert month_display_name(1, CAL) == "Jan"
    assert month_display_name(2, CAL) == "Frostmoot"
    assert month_display_name(9, CAL) == "Month 9"


def test_year_display_name():
    assert year_display_name(1, CAL) == "First Age"
    assert year_display_name(-4, CAL) == "-4"
