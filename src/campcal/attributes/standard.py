from __future__ import annotations
from typing import Any, Dict

from ..engines.dates import year_display_name
from ..engines.structure import leap_days_in_month
from .registry import register_attribute

def weekday(info, calendar) -> Dict[str, Any]:
    return {"weekday": info.weekday, "weekday_name": info.weekday_name}

def season(info, calendar) -> Dict[str, Any]:
    return {"season": info.season}

def moons(info, calendar) -> Dict[str, Any]:
    return {"moons": dict(info.moons)}

def leap_year(info, calendar) -> Dict[str, Any]:
    # leap days are informational; arithmetic never inserts them
    d = info.date
    return {
        "is_leap_year": info.is_leap_year,
        "leap_days_in_month": leap_days_in_month(d.month, d.year, calendar),
    }

def era(info, calendar) -> Dict[str, Any]:
    return {
        "year_name": year_display_name(info.date.year, calendar),
        "suffix": calendar.suffix,
    }

register_attribute("weekday", weekday)
register_attribute("season", season)
register_attribute("moons", moons)
register_attribute("leap_year", leap_year)
register_attribute("era", era)
