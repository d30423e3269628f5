"""
campcal.engines.structure
-------------------------
Static queries about a calendar's shape: month and year lengths, weekday
names, leap years and seasons.

Leap days are reported separately (``is_leap_year``, ``leap_days_in_month``)
and are never folded into ``days_in_month`` / ``days_in_year``; callers that
want leap-adjusted lengths combine them explicitly.
"""

from __future__ import annotations

from typing import Optional

from campcal.core.types import CalendarDefinition, CalendarSeason

DEFAULT_MONTH_LENGTH = 30


def days_in_month(month: int, calendar: CalendarDefinition) -> int:
    months = calendar.months
    if 1 <= month <= len(months):
        return months[month - 1].length
    return DEFAULT_MONTH_LENGTH


def days_in_year(calendar: CalendarDefinition) -> int:
    return sum(m.length for m in calendar.months)


def weekday_name(day_index: int, calendar: CalendarDefinition) -> str:
    weekdays = calendar.weekdays
    if not weekdays:
        return f"Day {day_index}"
    return weekdays[day_index % len(weekdays)] or f"Day {day_index}"


def is_leap_year(year: int, calendar: CalendarDefinition) -> bool:
    """
    Leap iff ``year - leap_year_start`` is a non-negative multiple of
    ``leap_year_offset``. Years before the start reference are never leap.
    """
    if not calendar.has_leap_year:
        return False
    offset = calendar.leap_year_offset
    start = calendar.leap_year_start
    if not offset or start is None:
        return False

    since_start = year - start
    return since_start >= 0 and since_start % offset == 0


def leap_days_in_month(month: int, year: int, calendar: CalendarDefinition) -> int:
    """Extra days a leap year adds to ``month`` (0 outside the configured leap month)."""
    if calendar.leap_year_month != month:
        return 0
    if not is_leap_year(year, calendar):
        return 0
    return calendar.leap_year_amount or 0


def season_for_month(month: int, calendar: CalendarDefinition) -> Optional[CalendarSeason]:
    for season in calendar.seasons:
        if season.contains(month):
            return season
    return None
