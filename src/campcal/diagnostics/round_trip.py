from __future__ import annotations

import argparse
import random
from typing import List

import campcal
from campcal.core.types import CalendarDate, CalendarDefinition
from campcal.engines.arithmetic import add_days, date_to_day_of_calendar, days_between, is_date_before
from campcal.engines.dates import format_date_canonical, parse_date
from campcal.engines.structure import days_in_month


def random_date(cal: CalendarDefinition, year_lo: int, year_hi: int) -> CalendarDate:
    year = random.randint(year_lo, year_hi)
    if cal.skip_year_zero and year == 0:
        year = 1
    month = random.randint(1, len(cal.months))
    day = random.randint(1, days_in_month(month, cal))
    return CalendarDate(year, month, day)


def parse_calendars(s: str) -> List[str]:
    # "gregorian,harptos" -> ["gregorian", "harptos"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(name: str, N: int, year_lo: int, year_hi: int, max_shift: int, seed: int, *,
                   max_failures: int) -> int:
    random.seed(seed)
    cal = campcal.get_calendar(name)
    failures = 0

    for _ in range(N):
        d0 = random_date(cal, year_lo, year_hi)
        n = random.randint(-max_shift, max_shift)
        checks = {}

        checks["canonical"] = parse_date(format_date_canonical(d0)) == d0

        d1 = add_days(d0, n, cal)
        checks["inverse"] = add_days(d1, -n, cal) == d0
        checks["distance"] = days_between(d0, d1, cal) == abs(n)
        checks["ordering"] = is_date_before(d0, d1) == (
            date_to_day_of_calendar(d0, cal) < date_to_day_of_calendar(d1, cal)
        )

        bad = [k for k, ok in checks.items() if not ok]
        if bad:
            failures += 1
            print("\nFAIL", ",".join(bad))
            print("calendar:", name)
            print("d0:", d0, " n:", n, " d1:", d1)
            print("day_info(debug=True):", campcal.day_info(d0, calendar=name, debug=True))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random property checks: canonical round trip, add/subtract inverse, distance, ordering.")
    p.add_argument("--calendars", type=str, default="gregorian,harptos,tidewater",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--years", type=int, nargs=2, default=(-500, 1500), metavar=("LO", "HI"),
                   help="Year range for random dates.")
    p.add_argument("--max-shift", type=int, default=5000, help="Largest |n| passed to add_days.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    total = 0
    for name in parse_calendars(args.calendars):
        f = roundtrip_test(name, args.N, args.years[0], args.years[1], args.max_shift, args.seed,
                           max_failures=args.max_failures)
        print(f"{name}: {args.N - f}/{args.N} ok")
        total += f

    return 1 if total else 0

if __name__ == "__main__":
    raise SystemExit(main())
