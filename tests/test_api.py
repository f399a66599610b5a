# tests/test_api.py

import pytest

import calconv
from calconv import GregorianDate, StandardCalendar, UnknownCalendarError

from conftest import CountingDate


def test_builtin_calendars():
    assert calconv.list_calendars() == ["gregorian"]
    assert calconv.get_calendar() is GregorianDate
    info = calconv.calendar_info("gregorian")
    assert info.name == "gregorian"
    assert info.type_name == "calconv.calendars.gregorian.GregorianDate"
    assert info.reference_date == "0001-01-01"


def test_make_date_and_standard():
    d = calconv.make_date(2000, 1, 1)
    assert isinstance(d, GregorianDate)
    assert calconv.to_standard(d) == StandardCalendar(730119)
    assert calconv.from_standard(730119) == d
    assert calconv.from_standard(StandardCalendar(-1)) == GregorianDate.from_parts(-1, 12, 31)


def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError):
        calconv.make_date(2000, 1, 1, calendar="julian")
    with pytest.raises(UnknownCalendarError):
        calconv.convert(calconv.make_date(2000, 1, 1), to="julian")


def test_add_days_returns_copy():
    d = calconv.make_date(2024, 2, 28)
    out = calconv.add_days(d, 2)
    assert out == GregorianDate.from_parts(2024, 3, 1)
    assert d == GregorianDate.from_parts(2024, 2, 28)


def test_days_between():
    a = calconv.make_date(1, 1, 1)
    b = calconv.make_date(2, 1, 1)
    assert calconv.days_between(a, b) == 365
    assert calconv.days_between(b, a) == 365


def test_is_leap_year():
    assert calconv.is_leap_year(2000)
    assert not calconv.is_leap_year(1900)
    with pytest.raises(calconv.ZeroYearError):
        calconv.is_leap_year(0)


def test_registered_calendar_round_trip(fresh_registry):
    calconv.register_calendar("counting", CountingDate)
    assert calconv.list_calendars() == ["counting", "gregorian"]

    g = calconv.make_date(1582, 10, 15)
    c = calconv.convert(g, to="counting")
    assert isinstance(c, CountingDate)
    assert c.n == g.to_standard().days
    assert calconv.convert(c, to="gregorian") == g
    assert calconv.from_standard(5, calendar="counting") == CountingDate(5)
    # mixed calendars are compared on the shared day count
    assert calconv.days_between(g, CountingDate(c.n + 10)) == 10


def test_register_duplicate(fresh_registry):
    with pytest.raises(KeyError):
        calconv.register_calendar("gregorian", CountingDate)
