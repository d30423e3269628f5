# tests/test_structure.py

from campcal.core.types import CalendarDefinition, CalendarMonth, CalendarSeason
from campcal.engines.structure import (
    DEFAULT_MONTH_LENGTH,
    days_in_month,
    days_in_year,
    is_leap_year,
    leap_days_in_month,
    season_for_month,
    weekday_name,
)

CAL = CalendarDefinition(
    name="two-month",
    months=(CalendarMonth("Jan", 31), CalendarMonth("Feb", 28)),
    weekdays=("Mon", "Tue", "Wed"),
)


def test_days_in_month_and_fallback():
    assert days_in_month(1, CAL) == 31
    assert days_in_month(2, CAL) == 28
    assert days_in_month(0, CAL) == DEFAULT_MONTH_LENGTH == 30
    assert days_in_month(3, CAL) == 30


def test_days_in_year():
    assert days_in_year(CAL) == 59
    assert days_in_year(CalendarDefinition()) == 0


def test_weekday_name_wraps_and_falls_back():
    assert weekday_name(0, CAL) == "Mon"
    assert weekday_name(4, CAL) == "Tue"
    assert weekday_name(4, CalendarDefinition()) == "Day 4"


def test_leap_year_disabled():
    off = CAL.tweak(has_leap_year=False, leap_year_offset=4, leap_year_start=0)
    assert not any(is_leap_year(y, off) for y in range(-20, 20))


def test_leap_year_every_fourth_from_start():
    cal = CAL.tweak(has_leap_year=True, leap_year_offset=4, leap_year_start=4,
                    leap_year_amount=1, leap_year_month=2)
    assert is_leap_year(4, cal)
    assert is_leap_year(8, cal)
    assert is_leap_year(2024, cal)
    assert not is_leap_year(5, cal)
    # before the start reference
    assert not is_leap_year(0, cal)
    assert not is_leap_year(-4, cal)


def test_leap_year_start_zero_counts_as_set():
    cal = CAL.tweak(has_leap_year=True, leap_year_offset=4, leap_year_start=0)
    assert is_leap_year(0, cal)
    assert is_leap_year(1372, cal)
    assert not is_leap_year(-4, cal)


def test_leap_year_needs_offset_and_start():
    assert not is_leap_year(8, CAL.tweak(has_leap_year=True, leap_year_offset=None, leap_year_start=0))
    assert not is_leap_year(8, CAL.tweak(has_leap_year=True, leap_year_offset=0, leap_year_start=0))
    assert not is_leap_year(8, CAL.tweak(has_leap_year=True, leap_year_offset=4, leap_year_start=None))


def test_leap_days_do_not_change_month_length():
    cal = CAL.tweak(has_leap_year=True, leap_year_offset=4, leap_year_start=0,
                    leap_year_amount=1, leap_year_month=2)
    assert leap_days_in_month(2, 8, cal) == 1
    assert leap_days_in_month(2, 9, cal) == 0
    assert leap_days_in_month(1, 8, cal) == 0
    assert days_in_month(2, cal) == 28
    assert days_in_year(cal) == 59


def test_season_wraps_year_end():
    cal = CalendarDefinition(
        months=tuple(CalendarMonth(f"M{i}", 30) for i in range(1, 13)),
        seasons=(CalendarSeason("Winter", 12, 2), CalendarSeason("Spring", 3, 5)),
    )
    assert season_for_month(12, cal).name == "Winter"
    assert season_for_month(1, cal).name == "Winter"
    assert season_for_month(2, cal).name == "Winter"
    assert season_for_month(4, cal).name == "Spring"
    assert season_for_month(7, cal) is None
