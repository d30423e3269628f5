"""
campcal.engines.recurrence
--------------------------
Recurring reminders on custom calendars.

The k-th occurrence is always computed from the base date (not by stepping
from the previous occurrence), so month-end clamping never drifts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional

from campcal.core.errors import CalendarError
from campcal.core.types import CalendarDate, CalendarDefinition
from .arithmetic import (
    add_days,
    add_months,
    add_years,
    date_to_day_of_calendar,
    is_date_after,
    is_date_before,
)

RecurrenceType = Literal["daily", "weekly", "monthly", "yearly", "moon"]

DEFAULT_WEEK_LENGTH = 7


@dataclass(frozen=True)
class RecurrenceRule:
    type: RecurrenceType
    interval: int = 1
    moon: Optional[str] = None  # only for type="moon"; defaults to the first moon

    def __post_init__(self) -> None:
        if self.type not in ("daily", "weekly", "monthly", "yearly", "moon"):
            raise ValueError("type must be one of: daily, weekly, monthly, yearly, moon")
        if self.interval < 1:
            raise ValueError("interval must be at least 1")


# ---------------------------------------------------------
# Occurrences
# ---------------------------------------------------------

def _day_step(rule: RecurrenceRule, calendar: CalendarDefinition) -> Optional[int]:
    """Length in days of one step, or None for month/year based rules."""
    if rule.type == "daily":
        return rule.interval
    if rule.type == "weekly":
        return (len(calendar.weekdays) or DEFAULT_WEEK_LENGTH) * rule.interval
    if rule.type == "moon":
        if not calendar.moons:
            raise CalendarError("Calendar has no moons for a moon-based recurrence",
                                details={"calendar": calendar.name})
        if rule.moon is None:
            return calendar.moons[0].cycle * rule.interval
        for moon in calendar.moons:
            if moon.name == rule.moon:
                return moon.cycle * rule.interval
        raise CalendarError("Unknown moon", details={"moon": rule.moon, "calendar": calendar.name})
    return None


def days_until(target: CalendarDate, current: CalendarDate, calendar: CalendarDefinition) -> int:
    """Signed day count from ``current`` to ``target``; negative once ``target`` has passed."""
    return date_to_day_of_calendar(target, calendar) - date_to_day_of_calendar(current, calendar)


def nth_occurrence(base: CalendarDate, rule: RecurrenceRule, k: int, calendar: CalendarDefinition) -> CalendarDate:
    step = _day_step(rule, calendar)
    if step is not None:
        return add_days(base, k * step, calendar)
    if rule.type == "monthly":
        return add_months(base, k * rule.interval, calendar)
    return add_years(base, k * rule.interval, calendar)


def next_occurrence(
    base: CalendarDate,
    rule: RecurrenceRule,
    current: CalendarDate,
    calendar: CalendarDefinition,
) -> CalendarDate:
    """First occurrence strictly after ``current``."""
    if is_date_after(base, current):
        return base

    step = _day_step(rule, calendar)
    if step is not None:
        gap = days_until(current, base, calendar)
        return add_days(base, (gap // step + 1) * step, calendar)

    k = 1
    nxt = nth_occurrence(base, rule, k, calendar)
    while not is_date_after(nxt, current):
        k += 1
        nxt = nth_occurrence(base, rule, k, calendar)
    return nxt


def occurrences(
    base: CalendarDate,
    rule: RecurrenceRule,
    start: CalendarDate,
    end: CalendarDate,
    calendar: CalendarDefinition,
) -> List[CalendarDate]:
    """All occurrences falling within ``[start, end]``."""
    out: List[CalendarDate] = []
    if is_date_after(start, end):
        return out

    k = 0
    step = _day_step(rule, calendar)
    if step is not None and is_date_before(base, start):
        gap = days_until(start, base, calendar)
        k = -(-gap // step)

    occ = nth_occurrence(base, rule, k, calendar)
    while not is_date_after(occ, end):
        if not is_date_before(occ, start):
            out.append(occ)
        k += 1
        occ = nth_occurrence(base, rule, k, calendar)
    return out
