from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from operator import index as _index
from typing import Any, Dict, Union

from .errors import InvalidMonthError, ZeroYearError


@dataclass(frozen=True, order=True)
class Year:
    """
    A proleptic year: ..., -2, -1, 1, 2, ...

    There is no year 0, so arithmetic across the gap is corrected
    (``Year(1) - Year(-1) == 1``).
    """
    value: int

    def __post_init__(self) -> None:
        value = _index(self.value)
        if value == 0:
            raise ZeroYearError()
        object.__setattr__(self, "value", value)

    @classmethod
    def try_from(cls, value: Union[int, "Year"]) -> "Year":
        if isinstance(value, Year):
            return value
        return cls(value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Year({self.value})"

    def __str__(self) -> str:
        return str(self.value)

    def is_leap_year(self) -> bool:
        from calconv.calendars.gregorian import GregorianDate
        return GregorianDate.is_leap_year(self)

    def difference(self, other: "Year") -> int:
        """Signed number of years from ``other`` to ``self``."""
        naive = self.value - other.value
        if self.value > 0 > other.value:
            return naive - 1
        if self.value < 0 < other.value:
            return naive + 1
        return naive

    def __sub__(self, other: "Year") -> int:
        if not isinstance(other, Year):
            return NotImplemented
        return self.difference(other)

    def next(self) -> "Year":
        return Year(1) if self.value == -1 else Year(self.value + 1)

    def previous(self) -> "Year":
        return Year(-1) if self.value == 1 else Year(self.value - 1)


class Month(IntEnum):
    """The twelve months, each carrying its 1-based code."""
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def _missing_(cls, value: Any) -> "Month":
        raise InvalidMonthError(value)

    @classmethod
    def try_from(cls, code: Union[int, "Month"]) -> "Month":
        if isinstance(code, Month):
            return code
        return cls(_index(code))

    @property
    def code(self) -> int:
        return int(self.value)

    @property
    def index(self) -> int:
        """0-based position, for indexing the day-count tables."""
        return int(self.value) - 1


@dataclass(frozen=True, order=True)
class StandardCalendar:
    """
    Days elapsed since day 0, where day 0 is Gregorian 1 January, year 1.

    Every calendar converts losslessly to and from this count; conversion
    between two calendars always goes through it.
    """
    days: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "days", _index(self.days))

    def __add__(self, days: int) -> "StandardCalendar":
        if isinstance(days, StandardCalendar):
            return NotImplemented
        return StandardCalendar(self.days + _index(days))

    def __sub__(self, other):
        if isinstance(other, StandardCalendar):
            return self.days - other.days
        return StandardCalendar(self.days - _index(other))

    def __int__(self) -> int:
        return self.days


@dataclass(frozen=True)
class CalendarInfo:
    name: str
    type_name: str
    reference_date: str
    meta: Dict[str, Any]
