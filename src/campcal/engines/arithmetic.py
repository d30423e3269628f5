"""
campcal.engines.arithmetic
--------------------------
Day arithmetic over custom calendars.

All functions are pure: they read the calendar definition and return fresh
values. Day counts use year 1, month 1, day 1 as day 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Union

from campcal.core.errors import EmptyCalendarError
from campcal.core.types import CalendarDate, CalendarDefinition
from .dates import parse_date
from .structure import days_in_month, days_in_year


def _require_months(calendar: CalendarDefinition) -> int:
    n = len(calendar.months)
    if n == 0:
        raise EmptyCalendarError(calendar.name)
    return n


# ---------------------------------------------------------
# Shifting
# ---------------------------------------------------------

def add_days(date: CalendarDate, days: int, calendar: CalendarDefinition) -> CalendarDate:
    """
    Move ``date`` by ``days`` (may be negative), carrying overflow into
    neighbouring months and years. Out-of-range input days are renormalized.
    """
    n_months = _require_months(calendar)
    year, month, day = date.year, date.month, date.day + days

    # forward
    while day > days_in_month(month, calendar):
        day -= days_in_month(month, calendar)
        month += 1
        if month > n_months:
            month = 1
            year += 1
            if calendar.skip_year_zero and year == 0:
                year = 1

    # backward
    while day < 1:
        month -= 1
        if month < 1:
            month = n_months
            year -= 1
            if calendar.skip_year_zero and year == 0:
                year = -1
        day += days_in_month(month, calendar)

    return CalendarDate(year, month, day)


def subtract_days(date: CalendarDate, days: int, calendar: CalendarDefinition) -> CalendarDate:
    return add_days(date, -days, calendar)


# ---------------------------------------------------------
# Linear day counts
# ---------------------------------------------------------

def date_to_day_of_calendar(date: CalendarDate, calendar: CalendarDefinition) -> int:
    """
    Signed day count of ``date`` where year 1, month 1, day 1 is day 1.

    With ``skip_year_zero`` year -1 directly precedes year 1. Without it,
    year 0 is a full year between them, so every year below 1 sits one
    further year back.
    """
    per_year = days_in_year(calendar)

    if date.year >= 1:
        total = (date.year - 1) * per_year
    elif calendar.skip_year_zero:
        total = -abs(date.year) * per_year
    else:
        total = (date.year - 1) * per_year

    total += day_of_year(date, calendar)
    return total


def days_between(date1: CalendarDate, date2: CalendarDate, calendar: CalendarDefinition) -> int:
    return abs(date_to_day_of_calendar(date2, calendar) - date_to_day_of_calendar(date1, calendar))


def day_of_week(date: CalendarDate, calendar: CalendarDefinition) -> int:
    """Index into ``calendar.weekdays``; 0 when the calendar has no weekdays."""
    n = len(calendar.weekdays)
    if n == 0:
        return 0
    total = date_to_day_of_calendar(date, calendar)
    return (total - 1 + calendar.start_offset) % n


def day_of_year(date: CalendarDate, calendar: CalendarDefinition) -> int:
    total = 0
    for m in range(1, date.month):
        total += days_in_month(m, calendar)
    return total + date.day


# ---------------------------------------------------------
# Comparison
# ---------------------------------------------------------

def is_same_date(date1: CalendarDate, date2: CalendarDate) -> bool:
    return date1.as_tuple() == date2.as_tuple()


def is_date_before(date1: CalendarDate, date2: CalendarDate) -> bool:
    return date1.as_tuple() < date2.as_tuple()


def is_date_after(date1: CalendarDate, date2: CalendarDate) -> bool:
    return date1.as_tuple() > date2.as_tuple()


def date_range(start: CalendarDate, end: CalendarDate, calendar: CalendarDefinition) -> List[CalendarDate]:
    """Every date from ``start`` to ``end`` inclusive; empty if ``start`` is after ``end``."""
    if is_date_after(start, end):
        return []

    out: List[CalendarDate] = []
    current = start
    while not is_date_after(current, end):
        out.append(current)
        current = add_days(current, 1, calendar)
    return out


# ---------------------------------------------------------
# Year/month stepping
# ---------------------------------------------------------

def _year_index(year: int, calendar: CalendarDefinition) -> int:
    # 0 for year 1; year -1 sits directly below it when year zero is skipped
    if calendar.skip_year_zero and year < 0:
        return year
    return year - 1


def _year_from_index(idx: int, calendar: CalendarDefinition) -> int:
    if calendar.skip_year_zero and idx < 0:
        return idx
    return idx + 1


def _month_index(date: CalendarDate, calendar: CalendarDefinition) -> int:
    return _year_index(date.year, calendar) * len(calendar.months) + (date.month - 1)


def _clamp(year: int, month: int, day: int, calendar: CalendarDefinition) -> CalendarDate:
    return CalendarDate(year, month, min(day, days_in_month(month, calendar)))


def add_years(date: CalendarDate, years: int, calendar: CalendarDefinition) -> CalendarDate:
    year = _year_from_index(_year_index(date.year, calendar) + years, calendar)
    return _clamp(year, date.month, date.day, calendar)


def add_months(date: CalendarDate, months: int, calendar: CalendarDefinition) -> CalendarDate:
    n_months = _require_months(calendar)
    idx, month0 = divmod(_month_index(date, calendar) + months, n_months)
    return _clamp(_year_from_index(idx, calendar), month0 + 1, date.day, calendar)


# ---------------------------------------------------------
# Ages, elapsed time, birthdays
# ---------------------------------------------------------

def calculate_age(birth: CalendarDate, current: CalendarDate, calendar: CalendarDefinition) -> int:
    age = current.year - birth.year
    if (current.month, current.day) < (birth.month, birth.day):
        age -= 1
    return age


@dataclass(frozen=True)
class Elapsed:
    years: int
    months: int
    days: int
    total_days: int
    display: str


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'}"


def calculate_elapsed(start: CalendarDate, end: CalendarDate, calendar: CalendarDefinition) -> Elapsed:
    """
    Years/months/days between two dates, in either order.

    Whole months are counted by stepping ``start`` forward with
    ``add_months`` (day clamped to short months); the days left over are an
    exact day count, so they are never negative even across intercalary
    one-day months.
    """
    n_months = _require_months(calendar)
    if is_date_after(start, end):
        start, end = end, start

    span = _month_index(end, calendar) - _month_index(start, calendar)
    if is_date_after(add_months(start, span, calendar), end):
        span -= 1
    days = days_between(add_months(start, span, calendar), end, calendar)
    years, months = divmod(span, n_months)

    parts: List[str] = []
    if years > 0:
        parts.append(_plural(years, "year"))
    if months > 0:
        parts.append(_plural(months, "month"))
    if days > 0 or not parts:
        parts.append(_plural(days, "day"))

    return Elapsed(
        years=years,
        months=months,
        days=days,
        total_days=days_between(start, end, calendar),
        display=", ".join(parts),
    )


def is_birthday(birth: CalendarDate, date: CalendarDate) -> bool:
    return birth.month == date.month and birth.day == date.day


def birthdays_on(date: CalendarDate, births: Mapping[str, Union[str, CalendarDate, None]]) -> List[str]:
    """Names whose birth date recurs on ``date``. Unparseable birth dates are skipped."""
    out: List[str] = []
    for name, birth in births.items():
        if not isinstance(birth, CalendarDate):
            birth = parse_date(birth)
        if birth is None:
            continue
        if is_birthday(birth, date):
            out.append(name)
    return out
