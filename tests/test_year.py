# tests/test_year.py

import pytest

from calconv import Year, ZeroYearError, DateCreationError


def test_zero_year_rejected():
    with pytest.raises(ZeroYearError):
        Year(0)
    with pytest.raises(ZeroYearError):
        Year.try_from(0)
    # still a plain ValueError for callers that don't know the hierarchy
    with pytest.raises(ValueError):
        Year(0)
    assert issubclass(ZeroYearError, DateCreationError)


@pytest.mark.parametrize("value", [1, -1, 2024, -4713, 10**12, -(10**12)])
def test_any_nonzero_year_accepted(value):
    y = Year.try_from(value)
    assert y.value == value
    assert int(y) == value


def test_try_from_passes_year_through():
    y = Year(1582)
    assert Year.try_from(y) is y


@pytest.mark.parametrize("value", [1.0, "1", None])
def test_non_integral_rejected(value):
    with pytest.raises(TypeError):
        Year(value)


def test_ordering():
    years = [Year(3), Year(-1), Year(1), Year(-400), Year(2)]
    assert sorted(years) == [Year(-400), Year(-1), Year(1), Year(2), Year(3)]
    assert Year(-1) < Year(1)
    assert Year(5) == Year(5)
    assert len({Year(5), Year(5), Year(-5)}) == 2


def test_difference_same_sign():
    assert Year(2020).difference(Year(2000)) == 20
    assert Year(2000).difference(Year(2020)) == -20
    assert Year(-3).difference(Year(-5)) == 2
    assert Year(7) - Year(7) == 0


def test_difference_skips_year_zero():
    assert Year(1).difference(Year(-1)) == 1
    assert Year(-1).difference(Year(1)) == -1
    assert Year(1) - Year(-1) == 1
    assert Year(3) - Year(-3) == 5
    assert Year(-10) - Year(10) == -19


def test_difference_matches_counting_steps():
    y = Year(-7)
    for steps in range(1, 20):
        y = y.next()
        assert y - Year(-7) == steps
        assert Year(-7) - y == -steps


def test_next_and_previous():
    assert Year(-1).next() == Year(1)
    assert Year(1).previous() == Year(-1)
    assert Year(-2).next() == Year(-1)
    assert Year(2024).next() == Year(2025)
    assert Year(2024).previous() == Year(2023)


def test_leap_year():
    assert Year(2020).is_leap_year()
    assert Year(2000).is_leap_year()
    assert not Year(1900).is_leap_year()
    assert Year(-4).is_leap_year()
    assert not Year(-1).is_leap_year()
    assert not Year(-100).is_leap_year()
    assert Year(-400).is_leap_year()


def test_repr_and_str():
    assert repr(Year(-44)) == "Year(-44)"
    assert str(Year(1066)) == "1066"
