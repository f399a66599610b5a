"""
calconv.calendars.gregorian
---------------------------
The proleptic Gregorian calendar, with the no-year-zero numbering
(..., -2, -1, 1, 2, ...).

Day counting:
StandardCalendar day 0 is 1 January, year 1. Years -1, -2, ... have the same
lengths as years 1, 2, ... because the leap rule is applied to the signed year
value, so the negative half of the count is the mirror image of the positive
half, anchored at 31 December, year -1 (day -1).
"""

from __future__ import annotations

from functools import total_ordering
from operator import index as _index
from typing import Tuple, Union

from calconv.core.calendar import Calendar
from calconv.core.errors import InvalidDayError
from calconv.core.types import Month, StandardCalendar, Year

REG_DAYS_IN_MONTH: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
LEAP_DAYS_IN_MONTH: Tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DAYS_PER_400_YEARS = 146097  # 400 * 365 + 97 leap days

# Index 0 is StandardCalendar day 0 (1 January, year 1)
WEEKDAY_NAMES: Tuple[str, ...] = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

YearLike = Union[Year, int]
MonthLike = Union[Month, int]


def _leaps_through(n: int) -> int:
    """Number of leap years among 1..n (n >= 0). Also the count among -1..-n."""
    return n // 4 - n // 100 + n // 400


def _leap_years_strictly_between(a: int, b: int) -> int:
    """Leap years y with a < y < b, for non-zero a < b."""
    if a > 0:
        return _leaps_through(b - 1) - _leaps_through(a)
    if b < 0:
        return _leaps_through(-a - 1) - _leaps_through(-b)
    return _leaps_through(-a - 1) + _leaps_through(b - 1)


def _split_years(n: int) -> Tuple[int, int]:
    """
    Peel whole years of lengths len(1), len(2), ... off a day count n >= 0.

    Returns (k, r): k complete years were consumed and 0 <= r < len(k + 1).
    """
    cycles, n = divmod(n, DAYS_PER_400_YEARS)
    k = 400 * cycles
    while True:
        length = 366 if GregorianDate.is_leap_year(k + 1) else 365
        if n < length:
            return k, n
        n -= length
        k += 1


@total_ordering
class GregorianDate(Calendar):
    """
    A date in the proleptic Gregorian calendar.

    Build one with ``GregorianDate.from_parts(2008, 4, 22)``; the fields are
    validated against the month lengths of that year.
    """

    def __init__(self, year: YearLike, month: MonthLike, day: int):
        y = Year.try_from(year)
        m = Month.try_from(month)
        d = _index(day)
        dmax = self._table(y)[m.index]
        if not 1 <= d <= dmax:
            raise InvalidDayError(d, dmax)
        self._year = y
        self._month = m
        self._day = d

    @classmethod
    def from_parts(cls, year: YearLike, month: MonthLike, day: int) -> "GregorianDate":
        """
        Validating factory.

        >>> GregorianDate.from_parts(2020, 2, 29).day
        29
        >>> GregorianDate.from_parts(1900, 2, 29)
        Traceback (most recent call last):
        ...
        calconv.core.errors.InvalidDayError: day must be in 1..28, got 29
        """
        return cls(year, month, day)

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------
    @property
    def day(self) -> int:
        return self._day

    @property
    def month(self) -> Month:
        return self._month

    @property
    def year(self) -> Year:
        return self._year

    def _key(self) -> Tuple[int, int, int]:
        return (self._year.value, self._month.code, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "GregorianDate") -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._key() < other._key()

    # add_days mutates in place
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"GregorianDate({self._year.value}, {self._month.code}, {self._day})"

    def __str__(self) -> str:
        y = self._year.value
        sign = "-" if y < 0 else ""
        return f"{sign}{abs(y):04d}-{self._month.code:02d}-{self._day:02d}"

    def copy(self) -> "GregorianDate":
        return type(self)(self._year, self._month, self._day)

    __copy__ = copy

    # ---------------------------------------------------------
    # Leap years and month tables
    # ---------------------------------------------------------
    @staticmethod
    def is_leap_year(year: YearLike) -> bool:
        y = _index(year)
        return y % 4 == 0 and (y % 400 == 0 or y % 100 != 0)

    @classmethod
    def _table(cls, year: YearLike) -> Tuple[int, ...]:
        return LEAP_DAYS_IN_MONTH if cls.is_leap_year(year) else REG_DAYS_IN_MONTH

    @classmethod
    def days_in_month(cls, year: YearLike, month: MonthLike) -> int:
        return cls._table(Year.try_from(year))[Month.try_from(month).index]

    @classmethod
    def days_in_year(cls, year: YearLike) -> int:
        return 366 if cls.is_leap_year(Year.try_from(year)) else 365

    def day_of_year(self) -> int:
        """1-based position of the date within its year."""
        return sum(self._table(self._year)[: self._month.index]) + self._day

    def weekday(self) -> int:
        """Day of the week, Monday == 0 ... Sunday == 6 (day 0 was a Monday)."""
        return self.to_standard().days % 7

    # ---------------------------------------------------------
    # Day differences
    # ---------------------------------------------------------
    @classmethod
    def leap_days_between(cls, first: "GregorianDate", second: "GregorianDate") -> int:
        """
        Leap days that regular-year (365 day) arithmetic misses between two dates:
        one per leap year strictly between their years, plus the 29 February of
        the earlier date's year when that date is on or before it, plus the
        29 February of the later date's year when that date is past it.
        """
        if second < first:
            first, second = second, first
        a, b = first._year.value, second._year.value
        first_pre_leap = first._month <= Month.FEBRUARY and cls.is_leap_year(a)
        second_post_leap = second._month > Month.FEBRUARY and cls.is_leap_year(b)
        if a == b:
            return int(first_pre_leap and second_post_leap)
        return _leap_years_strictly_between(a, b) + int(first_pre_leap) + int(second_post_leap)

    @classmethod
    def days_between(cls, first: "GregorianDate", second: "GregorianDate") -> int:
        """Number of days between two dates, independent of argument order."""
        if not (isinstance(first, GregorianDate) and isinstance(second, GregorianDate)):
            raise TypeError("days_between() needs two GregorianDate values")
        if second < first:
            first, second = second, first

        i1, i2 = first._month.index, second._month.index
        if first._year == second._year:
            table = cls._table(first._year)
            return sum(table[i1:i2]) + second._day - first._day

        # Rest of the first year, counted after first's day.
        tail = REG_DAYS_IN_MONTH[i1] - first._day + sum(REG_DAYS_IN_MONTH[i1 + 1:])
        # Day of year of the second date.
        head = sum(REG_DAYS_IN_MONTH[:i2]) + second._day
        whole = (second._year - first._year - 1) * 365
        return tail + head + whole + cls.leap_days_between(first, second)

    # ---------------------------------------------------------
    # StandardCalendar conversion
    # ---------------------------------------------------------
    @classmethod
    def reference_date(cls) -> "GregorianDate":
        return cls(Year(1), Month.JANUARY, 1)

    def to_standard(self) -> StandardCalendar:
        ref = self.reference_date()
        n = self.days_between(ref, self)
        return StandardCalendar(n if self >= ref else -n)

    def as_days(self) -> int:
        return self.to_standard().days

    @classmethod
    def from_standard(cls, standard: StandardCalendar) -> "GregorianDate":
        n = standard.days
        if n >= 0:
            k, r = _split_years(n)
            year = k + 1
            doy = r + 1
        else:
            # Count backwards from 31 December, year -1.
            k, r = _split_years(-n - 1)
            year = -(k + 1)
            doy = (366 if cls.is_leap_year(year) else 365) - r
        return cls._from_day_of_year(year, doy)

    @classmethod
    def _from_day_of_year(cls, year: int, doy: int) -> "GregorianDate":
        table = cls._table(year)
        month_index = 0
        while doy > table[month_index]:
            doy -= table[month_index]
            month_index += 1
        return cls(Year(year), Month(month_index + 1), doy)

    def add_days(self, days: int) -> None:
        shifted = self.from_standard(self.to_standard() + days)
        self._year, self._month, self._day = shifted._year, shifted._month, shifted._day
