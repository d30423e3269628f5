"""
campcal.engines.dates
---------------------
Parsing and display of calendar dates.

The canonical text form ``[-]Y-M-D`` is what persistence layers store;
``format_date_canonical`` and ``parse_date`` round-trip it exactly.
"""

from __future__ import annotations

import re
from typing import Optional

from campcal.core.types import CalendarDate, CalendarDefinition

DATE_PATTERN = r"^-?\d{1,5}-\d{1,2}-\d{1,2}$"
_DATE_RE = re.compile(DATE_PATTERN, re.ASCII)


def parse_date(s: Optional[str]) -> Optional[CalendarDate]:
    """Parse ``[-]Y-M-D``. Returns None for anything that does not match."""
    if not s or not isinstance(s, str):
        return None
    if not _DATE_RE.fullmatch(s):
        return None

    negative = s.startswith("-")
    parts = s.lstrip("-").split("-")
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(p, 10) for p in parts)
    except ValueError:
        return None

    return CalendarDate(-year if negative else year, month, day)


def format_date_canonical(date: CalendarDate) -> str:
    return f"{date.year}-{date.month:02d}-{date.day:02d}"


def format_date(date: CalendarDate, calendar: CalendarDefinition) -> str:
    """
    Human display form: ``"{day} {month}, {year}[ {suffix}]"``.

    Month aliases are not applied here; see ``month_display_name``.
    """
    months = calendar.months
    if 1 <= date.month <= len(months) and months[date.month - 1].name:
        month_name = months[date.month - 1].name
    else:
        month_name = str(date.month)

    year_name = calendar.years.get(date.year) or str(date.year)
    suffix = calendar.suffix or ""

    out = f"{date.day} {month_name}, {year_name}"
    if suffix:
        out += " " + suffix
    return out


def month_display_name(month: int, calendar: CalendarDefinition) -> str:
    alias = calendar.month_aliases.get(month)
    if alias:
        return alias
    months = calendar.months
    if 1 <= month <= len(months) and months[month - 1].name:
        return months[month - 1].name
    return f"Month {month}"


def year_display_name(year: int, calendar: CalendarDefinition) -> str:
    return calendar.years.get(year) or str(year)
