"""campcal public API.

Engine functions (``campcal.engines.*``) take a ``CalendarDefinition`` explicitly;
the registry-backed helpers below look calendars up by name.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    age,
    as_date,
    calendar_info,
    current_date,
    day_info,
    elapsed,
    get_calendar,
    list_calendars,
    month_days,
    month_info,
    register_calendar,
    shift_date,
    year_info,
)
from .core.errors import (
    CalendarError,
    CalendarValidationError,
    CampcalError,
    DateParseError,
    EmptyCalendarError,
)
from .core.types import (
    CalendarDate,
    CalendarDefinition,
    CalendarMonth,
    CalendarMoon,
    CalendarSeason,
    DayInfo,
)
from .engines.arithmetic import (
    add_days,
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
from .engines.dates import format_date, format_date_canonical, month_display_name, parse_date
from .engines.moons import MOON_PHASES, moon_phase, moon_phases
from .engines.structure import days_in_month, days_in_year, is_leap_year, season_for_month, weekday_name
from .schema import calendar_from_dict, load_calendar

__all__ = [
    "age",
    "as_date",
    "calendar_info",
    "current_date",
    "day_info",
    "elapsed",
    "get_calendar",
    "list_calendars",
    "month_days",
    "month_info",
    "register_calendar",
    "shift_date",
    "year_info",
    "CalendarError",
    "CalendarValidationError",
    "CampcalError",
    "DateParseError",
    "EmptyCalendarError",
    "CalendarDate",
    "CalendarDefinition",
    "CalendarMonth",
    "CalendarMoon",
    "CalendarSeason",
    "DayInfo",
    "add_days",
    "birthdays_on",
    "calculate_age",
    "calculate_elapsed",
    "date_range",
    "date_to_day_of_calendar",
    "day_of_week",
    "day_of_year",
    "days_between",
    "is_date_after",
    "is_date_before",
    "is_same_date",
    "subtract_days",
    "format_date",
    "format_date_canonical",
    "month_display_name",
    "parse_date",
    "MOON_PHASES",
    "moon_phase",
    "moon_phases",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "season_for_month",
    "weekday_name",
    "calendar_from_dict",
    "load_calendar",
]
