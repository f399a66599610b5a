from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import CalconvError

logger = logging.getLogger(__name__)

# Y-M-D, negative years either with a leading '-' or a trailing BC/BCE
_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})\s*(BCE?)?$", re.IGNORECASE)


def _parse_ymd(s: str) -> tuple[int, int, int]:
    m = _DATE_RE.match(s.strip())
    if not m:
        raise ValueError(f"expected a date as Y-M-D (e.g. 2008-04-22 or 44-03-15BC), got {s!r}")
    y, mo, d = int(m.group(1)), int(m.group(2)), int(m.group(3))
    if m.group(4):
        if y <= 0:
            raise ValueError(f"BC years are written as positive numbers, got {s!r}")
        y = -y
    return y, mo, d


def _make(s: str, calendar: str):
    import calconv

    return calconv.make_date(*_parse_ymd(s), calendar=calendar)


def _add_calendar_arg(p: argparse.ArgumentParser) -> None:
    import calconv

    p.add_argument("--calendar", default=calconv.DEFAULT_CALENDAR, help="calendar name (default: %(default)s)")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_info(argv: list[str]) -> int:
    from .calendars.gregorian import WEEKDAY_NAMES

    p = argparse.ArgumentParser(prog="calconv info", description="Describe a date")
    p.add_argument("date", help="Y-M-D")
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    d = _make(args.date, args.calendar)
    std = d.to_standard()
    print(f"date          = {d}")
    print(f"calendar      = {args.calendar}")
    print(f"standard day  = {std.days}")
    print(f"weekday       = {WEEKDAY_NAMES[std.days % 7]}")
    if hasattr(d, "day_of_year"):
        print(f"day of year   = {d.day_of_year()}")
    print(f"leap year     = {type(d).is_leap_year(d.year)}")
    return 0


def cmd_to_standard(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="calconv to-standard", description="Date -> days since 0001-01-01 (Gregorian)")
    p.add_argument("date", help="Y-M-D")
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    print(_make(args.date, args.calendar).to_standard().days)
    return 0


def cmd_from_standard(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv from-standard", description="Days since 0001-01-01 (Gregorian) -> date")
    p.add_argument("days", type=int)
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    print(calconv.from_standard(args.days, calendar=args.calendar))
    return 0


def cmd_convert(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv convert", description="Re-express a date in another calendar")
    p.add_argument("date", help="Y-M-D")
    _add_calendar_arg(p)
    p.add_argument("--to", default=calconv.DEFAULT_CALENDAR, help="target calendar (default: %(default)s)")
    args = p.parse_args(argv)

    print(calconv.convert(_make(args.date, args.calendar), to=args.to))
    return 0


def cmd_between(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv between", description="Number of days between two dates")
    p.add_argument("first", help="Y-M-D")
    p.add_argument("second", help="Y-M-D")
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    print(calconv.days_between(_make(args.first, args.calendar), _make(args.second, args.calendar)))
    return 0


def cmd_add(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv add", description="Shift a date by a signed number of days")
    p.add_argument("date", help="Y-M-D")
    p.add_argument("days", type=int)
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    print(calconv.add_days(_make(args.date, args.calendar), args.days))
    return 0


def cmd_leap(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv leap", description="Leap-year test")
    p.add_argument("year", type=int)
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    leap = calconv.is_leap_year(args.year, calendar=args.calendar)
    print(f"{args.year} is {'a' if leap else 'not a'} leap year")
    return 0


def cmd_calendars(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv calendars", description="List registered calendars")
    p.parse_args(argv)
    for name in calconv.list_calendars():
        info = calconv.calendar_info(name)
        print(f"{name:12s} {info.type_name}  (day 0 = {info.reference_date})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calconv", description="Calendar conversion toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    p.add_argument("--log-level", default=None, help="log level name (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("info", help="Describe a date (standard day, weekday, leap year)")
    sub.add_parser("to-standard", help="Date -> standard day count")
    sub.add_parser("from-standard", help="Standard day count -> date")
    sub.add_parser("convert", help="Convert a date to another calendar")
    sub.add_parser("between", help="Days between two dates")
    sub.add_parser("add", help="Shift a date by N days")
    sub.add_parser("leap", help="Leap-year test")
    sub.add_parser("calendars", help="List registered calendars")

    # diagnostics
    sub.add_parser("month", help="Print a month grid (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "info": cmd_info,
        "to-standard": cmd_to_standard,
        "from-standard": cmd_from_standard,
        "convert": cmd_convert,
        "between": cmd_between,
        "add": cmd_add,
        "leap": cmd_leap,
        "calendars": cmd_calendars,
    }

    from .logging_setup import setup_logging

    try:
        setup_logging(level="DEBUG" if args.verbose else (args.log_level or "WARNING"))
        logger.debug("command %s %s", args.cmd, rest)

        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "month":
            return _run_module_main("calconv.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "calconv.diagnostics.round_trip",
                "leap-years": "calconv.diagnostics.leap_years",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (CalconvError, ValueError) as e:
        print(f"calconv: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
