"""Diagnostics package.

- round_trip, pretty_month: always available, stdlib only
- leap_years: needs the diagnostics extra (numpy, matplotlib)
"""

__all__ = ["pretty_month", "round_trip", "leap_years"]
