from __future__ import annotations

import argparse

import calconv


def dow_header(w: int = 8) -> str:
    return " ".join(name.ljust(w) for name in ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"))


def cell(top: str, bot: str, w: int = 8) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def format_grid(title: str, weeks: list[list[tuple[str, str]]]) -> str:
    lines = [title, dow_header(), "-" * len(dow_header())]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


def month_weeks(year: int, month: int, *, calendar: str = calconv.DEFAULT_CALENDAR) -> list[list[tuple[str, str]]]:
    """Monday-first rows of (day number, standard day) cells for one month."""
    first = calconv.make_date(year, month, 1, calendar=calendar)
    n0 = first.to_standard().days

    days = []
    d = first
    while d.month == first.month:
        n = n0 + len(days)
        days.append((f"{d.day:2d}", f"{n}"))
        d = calconv.add_days(d, 1)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = n0 % 7  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month calendar with day numbers and their standard day counts."
    )
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--calendar", default=calconv.DEFAULT_CALENDAR)
    args = p.parse_args(argv)

    weeks = month_weeks(args.year, args.month, calendar=args.calendar)
    month = calconv.Month.try_from(args.month)
    title = f"{args.calendar} month  {args.year}-{month.code:02d} ({month.name.title()})"
    print(format_grid(title, weeks))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
