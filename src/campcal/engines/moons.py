"""
campcal.engines.moons
---------------------
Named lunar phases for any number of independent moons.

The cycle fraction is split into eight bins of width 1/8 centred on the
principal phases. The New Moon bin straddles the wraparound, so it covers
``[0, 1/16)`` and ``[15/16, 1)``.
"""

from __future__ import annotations

from typing import Dict, Tuple

from campcal.core.errors import CalendarError
from campcal.core.types import CalendarDate, CalendarDefinition, CalendarMoon
from .arithmetic import day_of_year

NEW_MOON = "New Moon"
WAXING_CRESCENT = "Waxing Crescent"
FIRST_QUARTER = "First Quarter"
WAXING_GIBBOUS = "Waxing Gibbous"
FULL_MOON = "Full Moon"
WANING_GIBBOUS = "Waning Gibbous"
LAST_QUARTER = "Last Quarter"
WANING_CRESCENT = "Waning Crescent"

MOON_PHASES: Tuple[str, ...] = (
    NEW_MOON,
    WAXING_CRESCENT,
    FIRST_QUARTER,
    WAXING_GIBBOUS,
    FULL_MOON,
    WANING_GIBBOUS,
    LAST_QUARTER,
    WANING_CRESCENT,
)

# Upper bounds of the bins after New Moon; anything at or past the last
# bound wraps back to New Moon.
_BOUNDS: Tuple[Tuple[float, str], ...] = (
    (0.0625, NEW_MOON),
    (0.1875, WAXING_CRESCENT),
    (0.3125, FIRST_QUARTER),
    (0.4375, WAXING_GIBBOUS),
    (0.5625, FULL_MOON),
    (0.6875, WANING_GIBBOUS),
    (0.8125, LAST_QUARTER),
    (0.9375, WANING_CRESCENT),
)


def cycle_fraction(day: int, moon: CalendarMoon) -> float:
    if moon.cycle < 1:
        raise CalendarError("Moon cycle must be positive", details={"moon": moon.name, "cycle": moon.cycle})
    adjusted = (day + moon.shift) % moon.cycle
    return adjusted / moon.cycle


def moon_phase(day: int, moon: CalendarMoon) -> str:
    fraction = cycle_fraction(day, moon)
    for bound, phase in _BOUNDS:
        if fraction < bound:
            return phase
    return NEW_MOON


def moon_phases(date: CalendarDate, calendar: CalendarDefinition) -> Dict[str, str]:
    """Phase of every moon of ``calendar`` on ``date``, keyed by moon name."""
    doy = day_of_year(date, calendar)
    return {moon.name: moon_phase(doy, moon) for moon in calendar.moons}
