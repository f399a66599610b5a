"""
calconv.core.calendar
---------------------
The capability contract every calendar date type satisfies.

Standard Reference Frame:
All conversions go through StandardCalendar, the count of days since
Gregorian 1 January, year 1 (day 0). A calendar only knows how to reach that
count and how to come back from it; conversion between two calendars is
always ``Target.from_standard(source.to_standard())``, never a direct
pairwise routine.
"""

from __future__ import annotations

from typing import Any, Protocol, Type, TypeVar

from .types import StandardCalendar, Year

T = TypeVar("T", bound="Calendar")


class Calendar(Protocol):
    """
    A date in some calendar system.

    Implementations subclass this protocol explicitly to inherit
    ``convert_to``.
    """

    # ---------------------------------------------------------
    # 1. Field accessors
    # ---------------------------------------------------------
    @property
    def day(self) -> Any:
        """Day within the month."""
        ...

    @property
    def month(self) -> Any:
        """Month within the year."""
        ...

    @property
    def year(self) -> Year:
        """Year of the date."""
        ...

    # ---------------------------------------------------------
    # 2. Conversion primitives
    # ---------------------------------------------------------
    @classmethod
    def reference_date(cls: Type[T]) -> T:
        """The date of this calendar that falls on StandardCalendar day 0."""
        ...

    def to_standard(self) -> StandardCalendar:
        ...

    @classmethod
    def from_standard(cls: Type[T], standard: StandardCalendar) -> T:
        ...

    def convert_to(self, other: Type[T]) -> T:
        """Re-express this date in calendar ``other`` via StandardCalendar."""
        return convert(self, other)

    # ---------------------------------------------------------
    # 3. Calendar arithmetic
    # ---------------------------------------------------------
    @staticmethod
    def is_leap_year(year: Year) -> bool:
        ...

    def add_days(self, days: int) -> None:
        """
        Shift in place by a signed number of days. Must agree with
        ``from_standard(to_standard(self) + days)``.
        """
        ...

    @classmethod
    def days_between(cls: Type[T], first: T, second: T) -> int:
        """Non-negative number of days between two dates, in either order."""
        ...


def convert(value: Calendar, target: Type[T]) -> T:
    """Convert ``value`` to calendar type ``target`` through StandardCalendar."""
    if not callable(getattr(target, "from_standard", None)):
        raise TypeError(f"{target!r} does not implement from_standard()")
    return target.from_standard(value.to_standard())
