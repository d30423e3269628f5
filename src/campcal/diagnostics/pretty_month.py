from __future__ import annotations

import argparse
from typing import Optional

import campcal
from campcal.core.types import CalendarDate, CalendarDefinition
from campcal.engines.dates import month_display_name, year_display_name
from campcal.engines.moons import moon_phase
from campcal.engines.arithmetic import day_of_year
from campcal.engines.views import month_grid

PHASE_CODES = {
    "New Moon": "new",
    "Waxing Crescent": "wxc",
    "First Quarter": "1q",
    "Waxing Gibbous": "wxg",
    "Full Moon": "full",
    "Waning Gibbous": "wng",
    "Last Quarter": "3q",
    "Waning Crescent": "wnc",
}


def dow_header(cal: CalendarDefinition, w: int = 6) -> str:
    names = cal.weekdays or tuple(str(i + 1) for i in range(7))
    return " ".join(n[:w - 1].ljust(w) for n in names)


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, header: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_calendar(cal: CalendarDefinition, year: int, month: int, moon: Optional[str] = None) -> None:
    tracked = cal.moons[0] if cal.moons else None
    if moon is not None:
        tracked = next((m for m in cal.moons if m.name == moon), None)

    weeks: list[list[tuple[str, str]]] = []
    for row in month_grid(year, month, cal):
        wk = []
        for day in row:
            if day is None:
                wk.append(cell("", ""))
                continue
            bot = ""
            if tracked is not None:
                doy = day_of_year(CalendarDate(year, month, day), cal)
                bot = PHASE_CODES[moon_phase(doy, tracked)]
            wk.append(cell(f"{day:2d}", bot))
        weeks.append(wk)

    title = f"{cal.name}  {month_display_name(month, cal)} {year_display_name(year, cal)}"
    if cal.suffix:
        title += f" {cal.suffix}"
    if tracked is not None:
        title += f"   (moon: {tracked.name})"
    print_grid(title, dow_header(cal), weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month grid of a campaign calendar with moon phase codes."
    )
    p.add_argument("--calendar", default="harptos", help="registered calendar name (default: harptos)")
    p.add_argument("--month", nargs=2, type=int, metavar=("Y", "M"),
                   help="Month to print: Y M (e.g. 1372 1)")
    p.add_argument("--moon", default=None, help="Moon to show (default: the first moon)")
    args = p.parse_args(argv)

    cal = campcal.get_calendar(args.calendar)

    if not args.month:
        # sensible default demo
        month_calendar(cal, 1372, 1, moon=args.moon)
        return 0

    Y, M = args.month
    month_calendar(cal, Y, M, moon=args.moon)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
