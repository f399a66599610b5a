from __future__ import annotations

import argparse
import random
from datetime import date
from typing import List

import calconv
from calconv.core.types import StandardCalendar

# datetime.date covers 0001-01-01 .. 9999-12-31
_DT_MAX = date(9999, 12, 31).toordinal() - 1


def parse_calendars(s: str) -> List[str]:
    # "gregorian,other" -> ["gregorian", "other"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    lo: int,
    hi: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """Random standard days in [lo, hi]: day -> date -> day, shifts, and the stdlib cross-check."""
    random.seed(seed)
    failures = 0

    def fail(kind: str, **ctx) -> bool:
        nonlocal failures
        failures += 1
        print(f"\nFAIL ({kind})")
        print("calendar:", calendar)
        for k, v in ctx.items():
            print(f"{k}:", v)
        return failures >= max_failures

    for _ in range(N):
        n = random.randint(lo, hi)
        d = calconv.from_standard(n, calendar=calendar)

        back = d.to_standard().days
        if back != n:
            if fail("standard", n=n, date=repr(d), back=back):
                return failures

        if calendar == "gregorian" and 0 <= n <= _DT_MAX:
            ref = date.fromordinal(n + 1)
            if (d.year.value, d.month.code, d.day) != (ref.year, ref.month, ref.day):
                if fail("datetime", n=n, date=repr(d), expected=ref.isoformat()):
                    return failures

        k = random.randint(-1000, 1000)
        shifted = calconv.add_days(d, k)
        expected = type(d).from_standard(StandardCalendar(n + k))
        if shifted != expected or calconv.days_between(d, shifted) != abs(k):
            if fail("add_days", n=n, k=k, shifted=repr(shifted), expected=repr(expected)):
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: standard day -> date -> standard day.")
    p.add_argument("--calendars", type=str, default="gregorian", help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--lo", type=int, default=-1_000_000, help="Lowest standard day.")
    p.add_argument("--hi", type=int, default=3_700_000, help="Highest standard day.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    if args.hi < args.lo:
        raise SystemExit("--hi must be >= --lo")

    total_fail = 0
    for cal in parse_calendars(args.calendars):
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, lo=args.lo, hi=args.hi, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
