from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A day label in some custom calendar. Ordering is lexicographic on (year, month, day)."""
    year: int
    month: int  # 1-based
    day: int    # 1-based

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class CalendarMonth:
    name: str
    length: int
    intercalary: bool = False

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"Month '{self.name}' must have at least 1 day")


@dataclass(frozen=True)
class CalendarMoon:
    name: str
    cycle: int      # full cycle length in days
    shift: int = 0  # phase offset in days
    color: Optional[str] = None

    def __post_init__(self) -> None:
        if self.cycle < 1:
            raise ValueError(f"Moon '{self.name}' cycle must be positive")
        if self.shift < 0:
            raise ValueError(f"Moon '{self.name}' shift must be non-negative")


@dataclass(frozen=True)
class CalendarSeason:
    name: str
    month_start: int  # 1-based
    month_end: int    # 1-based, may be < month_start (wraps past year end)
    color: Optional[str] = None

    def contains(self, month: int) -> bool:
        if self.month_start <= self.month_end:
            return self.month_start <= month <= self.month_end
        return month >= self.month_start or month <= self.month_end


@dataclass(frozen=True)
class CalendarDefinition:
    """
    Pure data payload describing one campaign calendar.

    The engines never mutate it; every function takes it as an explicit argument.
    """
    months: Tuple[CalendarMonth, ...] = ()
    weekdays: Tuple[str, ...] = ()
    years: Mapping[int, str] = field(default_factory=dict)
    month_aliases: Mapping[int, str] = field(default_factory=dict)
    suffix: Optional[str] = None

    has_leap_year: bool = False
    leap_year_offset: Optional[int] = None
    leap_year_start: Optional[int] = None
    leap_year_amount: Optional[int] = None
    leap_year_month: Optional[int] = None

    start_offset: int = 0
    skip_year_zero: bool = False

    moons: Tuple[CalendarMoon, ...] = ()
    seasons: Tuple[CalendarSeason, ...] = ()

    name: str = ""
    description: Optional[str] = None
    date: Optional[str] = None  # current date, canonical form
    week_names: Tuple[str, ...] = ()
    format: Optional[str] = None
    show_birthdays: bool = False
    parameters: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # accept lists from callers, store tuples
        for name in ("months", "weekdays", "moons", "seasons", "week_names"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))
        if self.start_offset < 0:
            raise ValueError("start_offset must be non-negative")

    @property
    def month_count(self) -> int:
        return len(self.months)

    @property
    def week_length(self) -> int:
        return len(self.weekdays)

    def tweak(self, **kwargs) -> "CalendarDefinition":
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DayInfo:
    date: CalendarDate
    calendar: str
    canonical: str
    display: str
    weekday: int
    weekday_name: Optional[str]
    day_of_year: int
    is_leap_year: bool
    season: Optional[str] = None
    moons: Tuple[Tuple[str, str], ...] = ()
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
