from __future__ import annotations

import argparse
import importlib
import json
import re
import sys
from typing import Any, Union

from campcal.engines.dates import DATE_PATTERN

_DATE_RE = re.compile(DATE_PATTERN, re.ASCII)


# `campcal diag <tool> ...` forwards the remaining arguments to the tool's main(argv)
DIAG_TOOLS = {
    "round-trip": "campcal.diagnostics.round_trip",
    "pretty-month": "campcal.diagnostics.pretty_month",
}


def _run_diag(tool: str, argv: list[str]) -> int:
    mod = importlib.import_module(DIAG_TOOLS[tool])
    return int(mod.main(argv) or 0)


def _calendar(args: argparse.Namespace) -> Union[str, Any]:
    """Calendar name, or a definition loaded from --file."""
    if args.file:
        from campcal.schema import load_calendar
        return load_calendar(args.file)
    return args.calendar


def _print_json(obj: Any) -> None:
    print(json.dumps(obj, indent=2, ensure_ascii=False, default=str))


def cmd_day(args: argparse.Namespace) -> int:
    import campcal

    info = campcal.day_info(args.date, calendar=_calendar(args), attributes=tuple(args.attr), debug=args.debug)
    print(f"{info.display}  [{info.canonical}]  calendar={info.calendar}")
    if info.weekday_name is not None:
        print(f"  weekday      : {info.weekday_name} ({info.weekday})")
    print(f"  day of year  : {info.day_of_year}")
    print(f"  leap year    : {'yes' if info.is_leap_year else 'no'}")
    if info.season:
        print(f"  season       : {info.season}")
    for moon, phase in info.moons:
        print(f"  moon {moon:<8}: {phase}")
    if info.attributes:
        print("  attributes   :", info.attributes)
    if info.debug:
        print("  debug        :", info.debug)
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    import campcal
    from campcal.engines.dates import format_date_canonical

    d = campcal.shift_date(args.date, args.days, calendar=_calendar(args))
    print(format_date_canonical(d))
    return 0


def cmd_between(args: argparse.Namespace) -> int:
    import campcal

    e = campcal.elapsed(args.start, args.end, calendar=_calendar(args))
    print(e.total_days)
    if args.verbose:
        print(e.display)
    return 0


def cmd_age(args: argparse.Namespace) -> int:
    import campcal

    print(campcal.age(args.birth, args.current, calendar=_calendar(args)))
    return 0


def cmd_month(args: argparse.Namespace) -> int:
    import campcal

    info = campcal.month_info(args.year, args.month, calendar=_calendar(args))
    if args.json:
        _print_json(info)
        return 0

    title = f"{info['name']} {args.year}"
    if info["intercalary"]:
        title += "  (intercalary)"
    if info["season"]:
        title += f"  [{info['season']}]"
    print(title)
    width = 5
    if info["weekdays"]:
        print(" ".join(n[:width - 1].ljust(width) for n in info["weekdays"]))
    for row in info["grid"]:
        print(" ".join(("" if d is None else f"{d:2d}").ljust(width) for d in row))
    return 0


def cmd_year(args: argparse.Namespace) -> int:
    import campcal
    from dataclasses import asdict

    info = campcal.year_info(args.year, calendar=_calendar(args))
    if args.json:
        info = dict(info, months=[asdict(m) for m in info["months"]])
        _print_json(info)
        return 0

    leap = "  (leap year)" if info["is_leap_year"] else ""
    print(f"{info['name']}  {info['days']} days{leap}")
    for m in info["months"]:
        tags = []
        if m.intercalary:
            tags.append("intercalary")
        if m.season:
            tags.append(m.season)
        if m.moon_phase:
            tags.append(m.moon_phase)
        print(f"  {m.month:2d}  {m.name:<22} {m.length:3d}d  " + ", ".join(tags))
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    import campcal

    for name in campcal.list_calendars():
        info = campcal.calendar_info(name)
        print(f"{name:<12} {info['months']:2d} months  {info['days_in_year']:3d} days  {info['description'] or ''}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    from campcal.core.errors import CalendarValidationError
    from campcal.schema import load_calendar

    try:
        cal = load_calendar(args.path)
    except CalendarValidationError as exc:
        print(f"{args.path}: invalid", file=sys.stderr)
        for err in exc.errors:
            loc = ".".join(str(p) for p in err.get("loc", ()))
            print(f"  {loc}: {err.get('msg')}", file=sys.stderr)
        return 1
    print(f"{args.path}: ok ({cal.name}, {cal.month_count} months)")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="campcal", description="Campaign calendar toolkit CLI.")
    p.add_argument("--calendar", default=None, help="registered calendar name (default: CAMPCAL_DEFAULT_CALENDAR)")
    p.add_argument("--file", default=None, help="load the calendar from a JSON file instead")
    p.add_argument("--log-level", default=None, help="DEBUG|INFO|WARNING|ERROR")
    p.add_argument("--json-logs", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_day = sub.add_parser("day", help="Describe one date")
    p_day.add_argument("date", help="[-]Y-M-D")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p_day.set_defaults(func=cmd_day)

    p_add = sub.add_parser("add", help="Shift a date by N days (N may be negative)")
    p_add.add_argument("date")
    p_add.add_argument("days", type=int)
    p_add.set_defaults(func=cmd_add)

    p_between = sub.add_parser("between", help="Days between two dates")
    p_between.add_argument("start")
    p_between.add_argument("end")
    p_between.add_argument("-v", "--verbose", action="store_true", help="also print years/months/days")
    p_between.set_defaults(func=cmd_between)

    p_age = sub.add_parser("age", help="Age on a date (default: the calendar's current date)")
    p_age.add_argument("birth")
    p_age.add_argument("current", nargs="?", default=None)
    p_age.set_defaults(func=cmd_age)

    p_month = sub.add_parser("month", help="Print a month grid")
    p_month.add_argument("year", type=int)
    p_month.add_argument("month", type=int)
    p_month.add_argument("--json", action="store_true")
    p_month.set_defaults(func=cmd_month)

    p_year = sub.add_parser("year", help="Print a year overview")
    p_year.add_argument("year", type=int)
    p_year.add_argument("--json", action="store_true")
    p_year.set_defaults(func=cmd_year)

    p_list = sub.add_parser("list", help="List registered calendars")
    p_list.set_defaults(func=cmd_list)

    p_validate = sub.add_parser("validate", help="Validate a JSON calendar file")
    p_validate.add_argument("path")
    p_validate.set_defaults(func=cmd_validate)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=sorted(DIAG_TOOLS), help="Which diagnostic to run")

    return p


def main(argv: list[str] | None = None) -> int:
    from campcal.core.config import get_settings
    from campcal.core.errors import CampcalError
    from campcal.core.logging import configure_logging, get_logger

    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `campcal Y-M-D ...`
    if argv and _DATE_RE.fullmatch(argv[0]):
        argv = ["day"] + argv

    p = _build_parser()
    args, rest = p.parse_known_args(argv)

    settings = get_settings()
    configure_logging(level=args.log_level or settings.log_level,
                      json_format=args.json_logs or settings.json_logs)
    logger = get_logger(__name__)
    logger.debug("cli_command", cmd=args.cmd, calendar=args.calendar, file=args.file)

    if args.cmd == "diag":
        return _run_diag(args.tool, rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    try:
        return args.func(args)
    except (CampcalError, KeyError) as exc:
        logger.info("cli_error", cmd=args.cmd, error=str(exc))
        msg = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
        print(f"campcal: error: {msg}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
