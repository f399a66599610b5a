import pytest

from calconv import Calendar, Month, StandardCalendar, Year
from calconv import api
from calconv._bootstrap import build_registry


class CountingDate(Calendar):
    """A bare day-count calendar, used to exercise cross-calendar conversion."""

    def __init__(self, n: int):
        self.n = n

    @property
    def day(self) -> int:
        return self.n

    @property
    def month(self) -> Month:
        return Month.JANUARY

    @property
    def year(self) -> Year:
        return Year(1)

    @classmethod
    def reference_date(cls) -> "CountingDate":
        return cls(0)

    def to_standard(self) -> StandardCalendar:
        return StandardCalendar(self.n)

    @classmethod
    def from_standard(cls, standard: StandardCalendar) -> "CountingDate":
        return cls(standard.days)

    @staticmethod
    def is_leap_year(year) -> bool:
        return False

    def add_days(self, days: int) -> None:
        self.n += days

    @classmethod
    def days_between(cls, first, second) -> int:
        return abs(first.n - second.n)

    def __eq__(self, other):
        return isinstance(other, CountingDate) and other.n == self.n

    def __repr__(self):
        return f"CountingDate({self.n})"

    def __str__(self):
        return f"day {self.n}"


@pytest.fixture
def fresh_registry():
    """Swap in a freshly built registry so tests can register calendars freely."""
    saved = api._registry
    api.set_registry(build_registry())
    yield api._reg()
    api.set_registry(saved)
