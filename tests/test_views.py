# tests/test_views.py

from campcal.core.types import CalendarDefinition, CalendarMonth
from campcal.engines.specs import HARPTOS, TIDEWATER
from campcal.engines.views import month_grid, year_overview

CAL = CalendarDefinition(
    name="two-month",
    months=(CalendarMonth("Jan", 31), CalendarMonth("Feb", 28)),
    weekdays=("Mon", "Tue", "Wed"),
)


def test_month_grid_starts_on_first_weekday():
    grid = month_grid(1, 1, CAL)
    assert len(grid) == 11
    assert grid[0] == [1, 2, 3]
    assert grid[-1] == [31, None, None]


def test_month_grid_leading_blanks():
    # 1 Feb of year 1 is day 32, a Tuesday
    grid = month_grid(1, 2, CAL)
    assert grid[0] == [None, 1, 2]
    assert grid[-1] == [27, 28, None]
    assert all(len(row) == 3 for row in grid)


def test_month_grid_contains_every_day_once():
    for year in (1, 2, 50):
        for month in range(1, len(TIDEWATER.months) + 1):
            grid = month_grid(year, month, TIDEWATER)
            days = [d for row in grid for d in row if d is not None]
            assert days == list(range(1, TIDEWATER.months[month - 1].length + 1))
            assert all(len(row) == 6 for row in grid)


def test_month_grid_defaults_to_seven_columns():
    grid = month_grid(1, 1, CAL.tweak(weekdays=()))
    assert all(len(row) == 7 for row in grid)
    assert grid[0][0] == 1


def test_year_overview_harptos():
    months = year_overview(1372, HARPTOS)
    assert len(months) == 17
    assert months[0].name == "Deepwinter"
    assert months[0].season == "Winter"
    assert months[0].moon_phase == "New Moon"
    assert months[1].name == "Midwinter"
    assert months[1].intercalary
    assert months[1].length == 1
    assert not months[2].intercalary
    assert sum(m.length for m in months) == 365
