"""
campcal.engines.views
---------------------
Month grids and per-year month summaries, the shapes calendar pages render.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from campcal.core.types import CalendarDate, CalendarDefinition
from .arithmetic import _require_months, day_of_week, day_of_year
from .dates import month_display_name
from .moons import moon_phase
from .structure import days_in_month, season_for_month

DEFAULT_WEEK_LENGTH = 7


@dataclass(frozen=True)
class MonthSummary:
    month: int
    name: str
    length: int
    intercalary: bool
    season: Optional[str]
    first_weekday: int
    moon_phase: Optional[str]  # first moon, on day 1 of the month


def month_grid(year: int, month: int, calendar: CalendarDefinition) -> List[List[Optional[int]]]:
    """
    Weeks of day numbers for one month. Cells before day 1 and after the
    last day are None; every row has exactly one week's worth of cells.
    """
    width = len(calendar.weekdays) or DEFAULT_WEEK_LENGTH
    lead = day_of_week(CalendarDate(year, month, 1), calendar)

    cells: List[Optional[int]] = [None] * lead
    cells.extend(range(1, days_in_month(month, calendar) + 1))
    while len(cells) % width:
        cells.append(None)

    return [cells[i:i + width] for i in range(0, len(cells), width)]


def year_overview(year: int, calendar: CalendarDefinition) -> List[MonthSummary]:
    n_months = _require_months(calendar)
    first_moon = calendar.moons[0] if calendar.moons else None

    out: List[MonthSummary] = []
    for m in range(1, n_months + 1):
        first = CalendarDate(year, m, 1)
        season = season_for_month(m, calendar)
        out.append(MonthSummary(
            month=m,
            name=month_display_name(m, calendar),
            length=days_in_month(m, calendar),
            intercalary=calendar.months[m - 1].intercalary,
            season=season.name if season else None,
            first_weekday=day_of_week(first, calendar),
            moon_phase=moon_phase(day_of_year(first, calendar), first_moon) if first_moon else None,
        ))
    return out
