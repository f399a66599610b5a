# tests/test_diagnostics.py

import pytest

from calconv.diagnostics import pretty_month, round_trip


def test_round_trip_passes():
    failures = round_trip.roundtrip_test(
        "gregorian", N=500, lo=-800_000, hi=3_600_000, seed=42, max_failures=1
    )
    assert failures == 0


def test_month_weeks_layout():
    # 2025-02-01 was a Saturday
    weeks = pretty_month.month_weeks(2025, 2)
    assert len(weeks) == 5
    assert all(len(wk) == 7 for wk in weeks)
    assert [c[0].strip() for c in weeks[0]] == ["", "", "", "", "", "1", "2"]
    assert weeks[-1][4][0].strip() == "28"
    assert weeks[-1][5][0].strip() == ""


def test_month_weeks_standard_days():
    weeks = pretty_month.month_weeks(2000, 1)
    cells = [c for wk in weeks for c in wk if c[0].strip()]
    assert len(cells) == 31
    assert int(cells[0][1]) == 730119
    assert int(cells[-1][1]) == 730149


def test_month_weeks_across_year_zero():
    weeks = pretty_month.month_weeks(-1, 12)
    cells = [c for wk in weeks for c in wk if c[0].strip()]
    assert len(cells) == 31
    assert int(cells[-1][1]) == -1


def test_format_grid():
    text = pretty_month.format_grid("title", pretty_month.month_weeks(2025, 2))
    lines = text.splitlines()
    assert lines[0] == "title"
    assert lines[1].startswith("Mo")
    assert len(lines) == 3 + 2 * 5


def test_leap_year_summary():
    np = pytest.importorskip("numpy")
    from calconv.diagnostics import leap_years

    years, flags = leap_years.leap_flags(np, 1, 400)
    s = leap_years.summarize(years, flags)
    assert s["years"] == 400
    assert s["leap_years"] == 97
    assert s["mean_year_days"] == pytest.approx(365.2425)
    assert s["skipped_centuries"] == [100, 200, 300]

    years, flags = leap_years.leap_flags(np, -400, -1)
    assert int(flags.sum()) == 97

    years, flags = leap_years.leap_flags(np, -3, 3)
    assert list(years) == [-3, -2, -1, 1, 2, 3]


def test_leap_year_plot(tmp_path):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    from calconv.diagnostics import leap_years

    out = tmp_path / "leap.png"
    assert leap_years.main(["--start-year", "1", "--end-year", "800", "--out", str(out)]) == 0
    assert out.exists()
