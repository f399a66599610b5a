#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from calconv.calendars.gregorian import GregorianDate


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calconv[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calconv[diagnostics]"') from e


def leap_flags(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Years in [start_year, end_year] (year 0 skipped) and their leap flags."""
    years = np.array([y for y in range(start_year, end_year + 1) if y != 0], dtype=np.int64)
    flags = np.fromiter((GregorianDate.is_leap_year(int(y)) for y in years), dtype=bool, count=len(years))
    return years, flags


def summarize(years, flags) -> dict:
    n_years = int(years.size)
    n_leap = int(flags.sum())
    return {
        "years": n_years,
        "leap_years": n_leap,
        "mean_year_days": float(365 + flags.mean()) if n_years else float("nan"),
        "skipped_centuries": [int(y) for y in years[(years % 100 == 0) & ~flags]],
    }


def build_points(years, flags) -> Tuple["np.ndarray", "np.ndarray"]:
    """Leap years as (century, year-within-century) cells."""
    ly = years[flags]
    return (ly // 100) * 100, ly % 100


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-year barcode: one cell per year, columns are centuries."
    )
    p.add_argument("--start-year", type=int, default=1)
    p.add_argument("--end-year", type=int, default=2400)
    p.add_argument("--out", default="leap_years.png")
    p.add_argument("--title", default="Gregorian leap years")
    p.add_argument("--no-plot", action="store_true", help="Only print the summary.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    years, flags = leap_flags(np, start_year, end_year)
    s = summarize(years, flags)
    print(f"Years {start_year}..{end_year}: {s['years']} years, {s['leap_years']} leap")
    print(f"  mean year length = {s['mean_year_days']:.6f} days")
    if s["skipped_centuries"]:
        shown = ", ".join(str(y) for y in s["skipped_centuries"][:12])
        more = " ..." if len(s["skipped_centuries"]) > 12 else ""
        print(f"  common century years: {shown}{more}")

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    x, y = build_points(years, flags)

    n_cols = int((end_year // 100) - (start_year // 100)) + 1
    fig, ax = plt.subplots(figsize=(max(6.0, 0.25 * n_cols + 2), 6))
    ax.scatter(x, y, s=6, marker="s", c="0.15", linewidths=0.0)
    ax.set_xlim(x.min() - 50 if x.size else start_year, x.max() + 150 if x.size else end_year)
    ax.set_ylim(-1, 100)
    ax.set_xlabel("Century (first year)")
    ax.set_ylabel("Year within century")
    ax.set_title(args.title)
    ax.tick_params(axis="both", which="both", length=0)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
