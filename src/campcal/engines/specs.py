from __future__ import annotations

from typing import Dict

from campcal.core.types import CalendarDefinition, CalendarMonth, CalendarMoon, CalendarSeason


# ============================================================
# GREGORIAN-SHAPED
# ============================================================

# Proleptic Gregorian month lengths; 1 January of year 1 was a Monday.
GREGORIAN_MONTHS = (
    CalendarMonth("January", 31),
    CalendarMonth("February", 28),
    CalendarMonth("March", 31),
    CalendarMonth("April", 30),
    CalendarMonth("May", 31),
    CalendarMonth("June", 30),
    CalendarMonth("July", 31),
    CalendarMonth("August", 31),
    CalendarMonth("September", 30),
    CalendarMonth("October", 31),
    CalendarMonth("November", 30),
    CalendarMonth("December", 31),
)

GREGORIAN = CalendarDefinition(
    name="gregorian",
    description="Twelve-month solar calendar with a leap day every fourth year.",
    months=GREGORIAN_MONTHS,
    weekdays=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    suffix="AD",
    has_leap_year=True,
    leap_year_offset=4,
    leap_year_start=4,
    leap_year_amount=1,
    leap_year_month=2,
    start_offset=0,
    skip_year_zero=True,
    moons=(CalendarMoon("Moon", cycle=29, shift=0, color="#C0C0C0"),),
    seasons=(
        CalendarSeason("Winter", 12, 2, color="#A0C4FF"),
        CalendarSeason("Spring", 3, 5, color="#B9FBC0"),
        CalendarSeason("Summer", 6, 8, color="#FFD6A5"),
        CalendarSeason("Autumn", 9, 11, color="#FFADAD"),
    ),
)


# ============================================================
# HARPTOS (Forgotten Realms)
# ============================================================

# Twelve 30-day months separated by five single-day festivals; Shieldmeet
# follows Midsummer every fourth year.
HARPTOS = CalendarDefinition(
    name="harptos",
    description="Calendar of Harptos: twelve months of three tendays plus festival days.",
    date="1372-1-1",
    months=(
        CalendarMonth("Hammer", 30),
        CalendarMonth("Midwinter", 1, intercalary=True),
        CalendarMonth("Alturiak", 30),
        CalendarMonth("Ches", 30),
        CalendarMonth("Tarsakh", 30),
        CalendarMonth("Greengrass", 1, intercalary=True),
        CalendarMonth("Mirtul", 30),
        CalendarMonth("Kythorn", 30),
        CalendarMonth("Flamerule", 30),
        CalendarMonth("Midsummer", 1, intercalary=True),
        CalendarMonth("Eleasis", 30),
        CalendarMonth("Eleint", 30),
        CalendarMonth("Highharvestide", 1, intercalary=True),
        CalendarMonth("Marpenoth", 30),
        CalendarMonth("Uktar", 30),
        CalendarMonth("Feast of the Moon", 1, intercalary=True),
        CalendarMonth("Nightal", 30),
    ),
    weekdays=tuple(f"{n}-day" for n in (
        "First", "Second", "Third", "Fourth", "Fifth", "Sixth", "Seventh", "Eighth", "Ninth", "Tenth",
    )),
    years={
        1357: "Year of the Prince",
        1372: "Year of Wild Magic",
        1374: "Year of Lightning Storms",
    },
    month_aliases={1: "Deepwinter", 3: "The Claws of the Cold", 17: "The Drawing Down"},
    suffix="DR",
    has_leap_year=True,
    leap_year_offset=4,
    leap_year_start=0,
    leap_year_amount=1,
    leap_year_month=10,
    moons=(CalendarMoon("Selune", cycle=30, shift=0, color="#E8E8FF"),),
    seasons=(
        CalendarSeason("Winter", 16, 3),
        CalendarSeason("Spring", 4, 7),
        CalendarSeason("Summer", 8, 11),
        CalendarSeason("Autumn", 12, 15),
    ),
)


# ============================================================
# TIDEWATER (two moons, no year zero)
# ============================================================

TIDEWATER = CalendarDefinition(
    name="tidewater",
    description="Eight-month coastal calendar with twin moons and no year zero.",
    date="101-3-12",
    months=(
        CalendarMonth("Ebb", 45),
        CalendarMonth("Shoal", 44),
        CalendarMonth("Brine", 45),
        CalendarMonth("Slack", 5, intercalary=True),
        CalendarMonth("Surge", 45),
        CalendarMonth("Swell", 44),
        CalendarMonth("Crest", 45),
        CalendarMonth("Drift", 44),
    ),
    weekdays=("Anchorday", "Netday", "Saltday", "Sailday", "Stormday", "Harborday"),
    years={-1: "The Drowned Year", 1: "First Tide", 100: "The Century Flood"},
    month_aliases={4: "The Still Water"},
    suffix="AT",
    start_offset=2,
    skip_year_zero=True,
    moons=(
        CalendarMoon("Pearl", cycle=28, shift=3, color="#F5F5F5"),
        CalendarMoon("Ember", cycle=47, shift=20, color="#D2691E"),
    ),
    seasons=(
        CalendarSeason("Stormtide", 7, 1, color="#4A6FA5"),
        CalendarSeason("Lowtide", 2, 4, color="#9DB4C0"),
        CalendarSeason("Hightide", 5, 6, color="#F2C14E"),
    ),
    show_birthdays=True,
    parameters={"layout": "yearly"},
)


ALL_SPECS: Dict[str, CalendarDefinition] = {
    "gregorian": GREGORIAN,
    "harptos": HARPTOS,
    "tidewater": TIDEWATER,
}
