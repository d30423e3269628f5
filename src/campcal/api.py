from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .attributes.registry import compute_attributes
from .core.config import get_settings
from .core.engine import CalendarRegistry
from .core.errors import DateParseError
from .core.types import CalendarDate, CalendarDefinition, DayInfo
from .engines.arithmetic import (
    Elapsed,
    add_days,
    calculate_age,
    calculate_elapsed,
    date_to_day_of_calendar,
    day_of_week,
    day_of_year,
)
from .engines.dates import format_date, format_date_canonical, month_display_name, parse_date, year_display_name
from .engines.moons import moon_phases
from .engines.structure import days_in_month, days_in_year, is_leap_year, season_for_month, weekday_name
from .engines.views import month_grid, year_overview

_registry: Optional[CalendarRegistry] = None

DateLike = Union[CalendarDate, str]
CalendarLike = Union[str, CalendarDefinition, None]

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def _resolve(calendar: CalendarLike) -> Tuple[str, CalendarDefinition]:
    if isinstance(calendar, CalendarDefinition):
        return calendar.name, calendar
    name = calendar if calendar is not None else get_settings().default_calendar
    return name, _reg().get(name)

def as_date(d: DateLike) -> CalendarDate:
    """Strict counterpart of ``parse_date`` for API boundaries."""
    if isinstance(d, CalendarDate):
        return d
    parsed = parse_date(d)
    if parsed is None:
        raise DateParseError(d)
    return parsed

# ============================================================
# Registry
# ============================================================

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(name: str) -> CalendarDefinition:
    return _reg().get(name)

def register_calendar(name: str, calendar: CalendarDefinition, *, overwrite: bool = False) -> None:
    if calendar.name != name:
        calendar = replace(calendar, name=name)
    _reg().register(name, calendar, overwrite=overwrite)

def calendar_info(calendar: CalendarLike = None) -> Dict[str, Any]:
    name, cal = _resolve(calendar)
    return {
        "name": name,
        "description": cal.description,
        "months": len(cal.months),
        "days_in_year": days_in_year(cal),
        "week_length": len(cal.weekdays),
        "moons": [m.name for m in cal.moons],
        "seasons": [s.name for s in cal.seasons],
        "has_leap_year": cal.has_leap_year,
        "skip_year_zero": cal.skip_year_zero,
        "suffix": cal.suffix,
        "current_date": cal.date,
    }

# ============================================================
# Day level
# ============================================================

def day_info(
    d: DateLike,
    *,
    calendar: CalendarLike = None,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    name, cal = _resolve(calendar)
    date = as_date(d)

    wd = day_of_week(date, cal)
    season = season_for_month(date.month, cal)
    info = DayInfo(
        date=date,
        calendar=name,
        canonical=format_date_canonical(date),
        display=format_date(date, cal),
        weekday=wd,
        weekday_name=weekday_name(wd, cal) if cal.weekdays else None,
        day_of_year=day_of_year(date, cal),
        is_leap_year=is_leap_year(date.year, cal),
        season=season.name if season else None,
        moons=tuple(moon_phases(date, cal).items()),
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, cal, attributes))
    if debug:
        info = replace(info, debug={
            "day_count": date_to_day_of_calendar(date, cal),
            "days_in_month": days_in_month(date.month, cal),
            "days_in_year": days_in_year(cal),
            "start_offset": cal.start_offset,
            "skip_year_zero": cal.skip_year_zero,
        })
    return info

def shift_date(d: DateLike, days: int, *, calendar: CalendarLike = None) -> CalendarDate:
    _, cal = _resolve(calendar)
    return add_days(as_date(d), days, cal)

def elapsed(start: DateLike, end: DateLike, *, calendar: CalendarLike = None) -> Elapsed:
    _, cal = _resolve(calendar)
    return calculate_elapsed(as_date(start), as_date(end), cal)

def age(birth: DateLike, current: Optional[DateLike] = None, *, calendar: CalendarLike = None) -> int:
    """Age on ``current``, or on the calendar's own current date when omitted."""
    _, cal = _resolve(calendar)
    if current is None:
        if not cal.date:
            raise DateParseError(cal.date)
        current = cal.date
    return calculate_age(as_date(birth), as_date(current), cal)

def current_date(calendar: CalendarLike = None) -> Optional[CalendarDate]:
    _, cal = _resolve(calendar)
    return parse_date(cal.date)

# ============================================================
# Month / year level
# ============================================================

def month_days(year: int, month: int, *, calendar: CalendarLike = None) -> List[DayInfo]:
    _, cal = _resolve(calendar)
    return [
        day_info(CalendarDate(year, month, d), calendar=cal)
        for d in range(1, days_in_month(month, cal) + 1)
    ]

def month_info(year: int, month: int, *, calendar: CalendarLike = None) -> Dict[str, Any]:
    name, cal = _resolve(calendar)
    season = season_for_month(month, cal)
    intercalary = 1 <= month <= len(cal.months) and cal.months[month - 1].intercalary
    return {
        "calendar": name,
        "year": year,
        "month": month,
        "name": month_display_name(month, cal),
        "length": days_in_month(month, cal),
        "intercalary": intercalary,
        "season": season.name if season else None,
        "weekdays": list(cal.weekdays),
        "grid": month_grid(year, month, cal),
    }

def year_info(year: int, *, calendar: CalendarLike = None) -> Dict[str, Any]:
    name, cal = _resolve(calendar)
    return {
        "calendar": name,
        "year": year,
        "name": year_display_name(year, cal),
        "is_leap_year": is_leap_year(year, cal),
        "days": days_in_year(cal),
        "months": year_overview(year, cal),
    }
