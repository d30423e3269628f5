"""Validation models for persisted calendar and weather payloads.

Stored calendars use camelCase keys (``monthAliases``, ``leapYearOffset``,
``skipYearZero`` ...); snake_case names are accepted as well. Validated
payloads convert to the frozen :class:`~campcal.core.types.CalendarDefinition`
the engines consume.

Example:
    >>> from campcal.schema import calendar_from_dict
    >>> cal = calendar_from_dict({"name": "Mini", "months": [{"name": "Jan", "length": 31}]})
    >>> cal.month_count
    1
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Annotated, Any, Dict, Iterable, List, NoReturn, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from campcal.core.errors import CalendarValidationError
from campcal.core.logging import get_logger
from campcal.core.types import CalendarDate, CalendarDefinition, CalendarMonth, CalendarMoon, CalendarSeason
from campcal.engines.dates import DATE_PATTERN, parse_date

logger = get_logger(__name__)

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

WEATHER_TYPES = (
    "clear",
    "cloudy",
    "rain",
    "drizzle",
    "snow",
    "sleet",
    "hail",
    "storm",
    "thunderstorm",
    "fog",
    "mist",
    "wind",
    "hot",
    "cold",
)

NonEmptyStr = Annotated[str, Field(min_length=1)]


class _Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class MonthModel(_Payload):
    name: str = Field(min_length=1, description="Month name")
    length: int = Field(ge=1, le=366, description="Number of days in the month")
    intercalary: bool = False


class MoonModel(_Payload):
    name: str = Field(min_length=1)
    cycle: int = Field(ge=1, le=365, description="Full cycle length in days")
    shift: int = Field(default=0, ge=0, description="Phase shift in days")
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)

    @model_validator(mode="after")
    def _shift_within_cycle(self) -> "MoonModel":
        if self.shift >= self.cycle:
            raise ValueError(f"Moon '{self.name}' shift must be less than its cycle ({self.cycle})")
        return self


class SeasonModel(_Payload):
    name: str = Field(min_length=1)
    month_start: int = Field(ge=1)
    month_end: int = Field(ge=1)
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)


class CalendarModel(_Payload):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN, description="Current date, [-]Y-M-D")

    months: List[MonthModel] = Field(default_factory=list)
    weekdays: List[NonEmptyStr] = Field(default_factory=list)
    years: Dict[int, str] = Field(default_factory=dict)
    seasons: List[SeasonModel] = Field(default_factory=list)
    moons: List[MoonModel] = Field(default_factory=list)
    week_names: List[NonEmptyStr] = Field(default_factory=list)
    month_aliases: Dict[int, str] = Field(default_factory=dict)

    suffix: Optional[str] = Field(default=None, max_length=50)
    format: Optional[str] = Field(default=None, max_length=100)

    has_leap_year: bool = False
    leap_year_amount: Optional[int] = Field(default=None, ge=1)
    leap_year_month: Optional[int] = Field(default=None, ge=1)
    leap_year_offset: Optional[int] = Field(default=None, ge=1)
    leap_year_start: Optional[int] = None

    start_offset: int = Field(default=0, ge=0)
    skip_year_zero: bool = False
    show_birthdays: bool = False
    parameters: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("month_aliases")
    @classmethod
    def _alias_keys_positive(cls, v: Dict[int, str]) -> Dict[int, str]:
        bad = sorted(k for k in v if k < 1)
        if bad:
            raise ValueError(f"Month alias keys must be 1-based month numbers, got {bad}")
        return v

    @model_validator(mode="after")
    def _check_cross_fields(self) -> "CalendarModel":
        week = len(self.weekdays)
        limit = week - 1 if week else 6
        if self.start_offset > limit:
            raise ValueError(f"start_offset must be in 0..{limit}")

        n_months = len(self.months)
        if n_months:
            for season in self.seasons:
                if season.month_start > n_months or season.month_end > n_months:
                    raise ValueError(f"Season '{season.name}' refers to a month beyond {n_months}")
            if self.has_leap_year and self.leap_year_month is not None and self.leap_year_month > n_months:
                raise ValueError(f"leap_year_month must be in 1..{n_months}")
        return self

    def to_definition(self) -> CalendarDefinition:
        return CalendarDefinition(
            name=self.name,
            description=self.description,
            date=self.date,
            months=tuple(CalendarMonth(m.name, m.length, m.intercalary) for m in self.months),
            weekdays=tuple(self.weekdays),
            years=dict(self.years),
            month_aliases=dict(self.month_aliases),
            suffix=self.suffix,
            format=self.format,
            has_leap_year=self.has_leap_year,
            leap_year_offset=self.leap_year_offset,
            leap_year_start=self.leap_year_start,
            leap_year_amount=self.leap_year_amount,
            leap_year_month=self.leap_year_month,
            start_offset=self.start_offset,
            skip_year_zero=self.skip_year_zero,
            moons=tuple(CalendarMoon(m.name, m.cycle, m.shift, m.color) for m in self.moons),
            seasons=tuple(CalendarSeason(s.name, s.month_start, s.month_end, s.color) for s in self.seasons),
            week_names=tuple(self.week_names),
            show_birthdays=self.show_birthdays,
            parameters=dict(self.parameters),
        )


class WeatherModel(_Payload):
    date: str = Field(pattern=DATE_PATTERN)
    weather_type: Optional[str] = Field(default=None, max_length=100)
    temperature: Optional[float] = None
    precipitation: Optional[str] = Field(default=None, max_length=100)
    wind: Optional[str] = Field(default=None, max_length=100)
    effect: Optional[str] = Field(default=None, max_length=500)
    calendar_id: Optional[str] = None

    @property
    def calendar_date(self) -> Optional[CalendarDate]:
        return parse_date(self.date)


# ============================================================
# Conversions
# ============================================================

def _raise_invalid(exc: ValidationError, what: str, source: Optional[str]) -> NoReturn:
    errors = exc.errors(include_url=False)
    logger.warning("validation_failed", what=what, source=source, error_count=len(errors))
    raise CalendarValidationError(f"Invalid {what}", errors=errors, source=source) from exc


def calendar_from_dict(data: Dict[str, Any], *, source: Optional[str] = None) -> CalendarDefinition:
    try:
        model = CalendarModel.model_validate(data)
    except ValidationError as exc:
        _raise_invalid(exc, "calendar", source)
    return model.to_definition()


def calendar_from_json(text: Union[str, bytes], *, source: Optional[str] = None) -> CalendarDefinition:
    try:
        model = CalendarModel.model_validate_json(text)
    except ValidationError as exc:
        _raise_invalid(exc, "calendar", source)
    return model.to_definition()


def load_calendar(path: Union[str, Path]) -> CalendarDefinition:
    """Load a JSON calendar file. A missing ``name`` defaults to the file stem."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning("calendar_json_invalid", path=str(path), error=str(exc))
        raise CalendarValidationError("Calendar file is not valid JSON", source=str(path)) from exc
    if isinstance(data, dict) and not data.get("name"):
        data["name"] = path.stem

    cal = calendar_from_dict(data, source=str(path))
    logger.info("calendar_loaded", path=str(path), calendar=cal.name, months=cal.month_count)
    return cal


def validate_definition(calendar: CalendarDefinition, *, name: Optional[str] = None) -> CalendarModel:
    """Run an in-memory definition through the same checks as a stored payload."""
    data = asdict(calendar)
    if name is not None:
        data["name"] = name
    try:
        return CalendarModel.model_validate(data)
    except ValidationError as exc:
        _raise_invalid(exc, f"calendar '{data['name']}'", None)


def calendar_to_dict(calendar: CalendarDefinition) -> Dict[str, Any]:
    """Persisted (camelCase, JSON-compatible) form of a calendar definition."""
    model = validate_definition(calendar)
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_calendar(calendar: CalendarDefinition, path: Union[str, Path]) -> None:
    path = Path(path)
    path.write_text(json.dumps(calendar_to_dict(calendar), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.debug("calendar_written", path=str(path), calendar=calendar.name)


def weather_from_dict(data: Dict[str, Any]) -> WeatherModel:
    try:
        return WeatherModel.model_validate(data)
    except ValidationError as exc:
        _raise_invalid(exc, "weather entry", None)


def weather_for_date(entries: Iterable[WeatherModel], date: CalendarDate) -> Optional[WeatherModel]:
    """First weather entry recorded for ``date``; stored dates may be padded or not."""
    for entry in entries:
        if entry.calendar_date == date:
            return entry
    return None
