# tests/test_arithmetic.py

import random

import pytest

from campcal.core.errors import CalendarError, EmptyCalendarError
from campcal.core.types import CalendarDate, CalendarDefinition, CalendarMonth
from campcal.engines.arithmetic import (
    add_days,
    add_months,
    birthdays_on,
    calculate_age,
    calculate_elapsed,
    date_range,
    date_to_day_of_calendar,
    day_of_week,
    day_of_year,
    days_between,
    is_date_after,
    is_date_before,
    is_same_date,
    subtract_days,
)
from campcal.engines.specs import GREGORIAN, HARPTOS, TIDEWATER
from campcal.engines.structure import days_in_month

D = CalendarDate

CAL = CalendarDefinition(
    name="two-month",
    months=(CalendarMonth("Jan", 31), CalendarMonth("Feb", 28)),
    weekdays=("Mon", "Tue", "Wed"),
)
CAL_NO_ZERO = CAL.tweak(name="two-month-no-zero", skip_year_zero=True)

ALL_CALS = [CAL, CAL_NO_ZERO, GREGORIAN, HARPTOS, TIDEWATER]


def random_date(cal, lo=-3000, hi=3000):
    year = random.randint(lo, hi)
    if cal.skip_year_zero and year == 0:
        year = 1
    month = random.randint(1, len(cal.months))
    return D(year, month, random.randint(1, days_in_month(month, cal)))


# --- shifting -------------------------------------------------------

def test_add_days_carries_into_next_month():
    assert add_days(D(1, 1, 30), 3, CAL) == D(1, 2, 2)


def test_add_days_zero_is_identity():
    assert add_days(D(5, 2, 14), 0, CAL) == D(5, 2, 14)


def test_add_days_renormalizes_out_of_range_day():
    assert add_days(D(1, 1, 40), 0, CAL) == D(1, 2, 9)


def test_backward_across_year_zero():
    assert add_days(D(1, 1, 1), -1, CAL_NO_ZERO) == D(-1, 2, 28)
    assert add_days(D(1, 1, 1), -1, CAL) == D(0, 2, 28)


def test_forward_across_year_zero():
    assert add_days(D(-1, 2, 28), 1, CAL_NO_ZERO) == D(1, 1, 1)
    assert add_days(D(-1, 2, 28), 1, CAL) == D(0, 1, 1)


def test_subtract_days():
    assert subtract_days(D(1, 2, 2), 3, CAL) == D(1, 1, 30)
    assert subtract_days(D(1, 1, 1), -59, CAL) == D(2, 1, 1)


def test_empty_calendar_raises():
    empty = CalendarDefinition(name="nothing")
    with pytest.raises(EmptyCalendarError):
        add_days(D(1, 1, 1), 1, empty)
    with pytest.raises(CalendarError):
        calculate_elapsed(D(1, 1, 1), D(2, 1, 1), empty)
    # still a ValueError for callers that only know the stdlib hierarchy
    with pytest.raises(ValueError):
        add_days(D(1, 1, 1), -1, empty)


# --- day counts -----------------------------------------------------

def test_day_count_examples():
    assert date_to_day_of_calendar(D(1, 1, 1), CAL) == 1
    assert date_to_day_of_calendar(D(1, 2, 1), CAL) == 32
    assert date_to_day_of_calendar(D(2, 1, 1), CAL) == 60
    assert date_to_day_of_calendar(D(0, 2, 28), CAL) == 0
    assert date_to_day_of_calendar(D(-1, 1, 1), CAL) == -117
    assert date_to_day_of_calendar(D(-1, 2, 28), CAL_NO_ZERO) == 0
    assert date_to_day_of_calendar(D(-1, 1, 1), CAL_NO_ZERO) == -58


def test_days_between_is_symmetric():
    assert days_between(D(1, 1, 30), D(1, 2, 2), CAL) == 3
    assert days_between(D(1, 2, 2), D(1, 1, 30), CAL) == 3
    assert days_between(D(-1, 2, 28), D(1, 1, 1), CAL_NO_ZERO) == 1


def test_harptos_year_length():
    assert days_between(D(1372, 1, 1), D(1373, 1, 1), HARPTOS) == 365


def test_day_of_week():
    assert day_of_week(D(1, 1, 1), CAL) == 0
    assert day_of_week(D(1, 1, 2), CAL) == 1
    assert day_of_week(D(1, 1, 4), CAL) == 0
    assert day_of_week(D(1, 1, 1), CAL.tweak(start_offset=2)) == 2
    # the day before day 1 is the last weekday, never a negative index
    assert day_of_week(D(0, 2, 28), CAL) == 2


def test_day_of_week_without_weekdays():
    assert day_of_week(D(12, 1, 5), CAL.tweak(weekdays=())) == 0


def test_gregorian_epoch_is_monday():
    assert GREGORIAN.weekdays[day_of_week(D(1, 1, 1), GREGORIAN)] == "Monday"


def test_day_of_year():
    assert day_of_year(D(1, 1, 1), CAL) == 1
    assert day_of_year(D(1, 2, 2), CAL) == 33
    assert day_of_year(D(1372, 17, 30), HARPTOS) == 365


# --- comparisons ----------------------------------------------------

def test_comparisons():
    assert is_same_date(D(1, 2, 3), D(1, 2, 3))
    assert not is_same_date(D(1, 2, 3), D(1, 2, 4))
    assert is_date_before(D(-1, 12, 30), D(1, 1, 1))
    assert is_date_before(D(1, 1, 30), D(1, 2, 1))
    assert is_date_after(D(2, 1, 1), D(1, 2, 28))
    assert not is_date_before(D(1, 1, 1), D(1, 1, 1))
    assert not is_date_after(D(1, 1, 1), D(1, 1, 1))


def test_date_range_inclusive():
    assert date_range(D(1, 1, 30), D(1, 2, 2), CAL) == [D(1, 1, 30), D(1, 1, 31), D(1, 2, 1), D(1, 2, 2)]
    assert date_range(D(1, 1, 1), D(1, 1, 1), CAL) == [D(1, 1, 1)]
    assert date_range(D(1, 2, 2), D(1, 1, 30), CAL) == []


# --- properties -----------------------------------------------------

def test_add_days_inverse():
    random.seed(42)
    for cal in ALL_CALS:
        for _ in range(500):
            d = random_date(cal)
            n = random.randint(-5000, 5000)
            assert add_days(add_days(d, n, cal), -n, cal) == d


def test_day_count_moves_with_add_days():
    random.seed(43)
    for cal in ALL_CALS:
        for _ in range(500):
            d = random_date(cal)
            n = random.randint(-5000, 5000)
            assert date_to_day_of_calendar(add_days(d, n, cal), cal) == date_to_day_of_calendar(d, cal) + n


def test_ordering_matches_day_count():
    random.seed(44)
    for cal in ALL_CALS:
        for _ in range(500):
            a = random_date(cal)
            b = random_date(cal)
            ca = date_to_day_of_calendar(a, cal)
            cb = date_to_day_of_calendar(b, cal)
            assert is_date_before(a, b) == (ca < cb)
            assert is_same_date(a, b) == (ca == cb)


def test_days_between_matches_shift():
    random.seed(45)
    for cal in ALL_CALS:
        for _ in range(300):
            d = random_date(cal)
            n = random.randint(-3000, 3000)
            assert days_between(d, add_days(d, n, cal), cal) == abs(n)


# --- ages, elapsed, birthdays ---------------------------------------

def test_calculate_age():
    assert calculate_age(D(100, 5, 10), D(120, 5, 9), HARPTOS) == 19
    assert calculate_age(D(100, 5, 10), D(120, 5, 10), HARPTOS) == 20
    assert calculate_age(D(100, 5, 10), D(120, 6, 1), HARPTOS) == 20


def test_calculate_elapsed_borrows_from_previous_month():
    e = calculate_elapsed(D(1, 1, 30), D(2, 2, 2), CAL)
    assert (e.years, e.months, e.days) == (1, 0, 3)
    assert e.total_days == 62
    assert e.display == "1 year, 3 days"


def test_calculate_elapsed_plural_and_zero():
    e = calculate_elapsed(D(1372, 1, 1), D(1374, 4, 11), HARPTOS)
    assert (e.years, e.months, e.days) == (2, 3, 10)
    assert e.display == "2 years, 3 months, 10 days"

    same = calculate_elapsed(D(5, 1, 1), D(5, 1, 1), CAL)
    assert same.total_days == 0
    assert same.display == "0 days"


def test_calculate_elapsed_skips_year_zero():
    e = calculate_elapsed(D(-1, 1, 1), D(1, 1, 1), CAL_NO_ZERO)
    assert e.years == 1
    assert e.total_days == 59


def test_calculate_elapsed_across_short_months():
    # Hammer 15 -> Alturiak 3 crosses the one-day Midwinter festival
    e = calculate_elapsed(D(1372, 1, 15), D(1372, 3, 3), HARPTOS)
    assert (e.years, e.months, e.days) == (0, 1, 3)
    assert e.total_days == 19
    assert e.display == "1 month, 3 days"

    e = calculate_elapsed(D(1, 1, 31), D(1, 3, 1), GREGORIAN)
    assert (e.years, e.months, e.days) == (0, 1, 1)
    assert e.total_days == 29
    assert e.display == "1 month, 1 day"


def test_calculate_elapsed_order_does_not_matter():
    e = calculate_elapsed(D(2, 1, 1), D(1, 1, 1), GREGORIAN)
    assert (e.years, e.months, e.days) == (1, 0, 0)
    assert e.total_days == 365
    assert e.display == "1 year"
    assert calculate_elapsed(D(1372, 3, 3), D(1372, 1, 15), HARPTOS) == calculate_elapsed(
        D(1372, 1, 15), D(1372, 3, 3), HARPTOS)


def test_calculate_elapsed_components_rebuild_the_span():
    random.seed(46)
    for cal in ALL_CALS:
        n_months = len(cal.months)
        for _ in range(300):
            a = random_date(cal, -200, 200)
            b = random_date(cal, -200, 200)
            e = calculate_elapsed(a, b, cal)
            lo, hi = min(a, b), max(a, b)
            assert e.years >= 0
            assert 0 <= e.months < n_months
            assert e.days >= 0
            assert e.total_days == days_between(a, b, cal)
            stepped = add_months(lo, e.years * n_months + e.months, cal)
            assert add_days(stepped, e.days, cal) == hi


def test_birthdays_on():
    births = {
        "Alda": "90-2-2",
        "Bren": D(5, 1, 1),
        "Cato": "garbage",
        "Dell": None,
        "Esk": "-12-02-02",
    }
    assert birthdays_on(D(1, 2, 2), births) == ["Alda", "Esk"]
    assert birthdays_on(D(7, 1, 1), births) == ["Bren"]
    assert birthdays_on(D(7, 1, 2), births) == []
