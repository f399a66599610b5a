from __future__ import annotations

class CalconvError(Exception):
    """Base error."""

class DateCreationError(CalconvError, ValueError):
    """Raised when year/month/day fields do not describe a valid date."""

class ZeroYearError(DateCreationError):
    """Raised when constructing a year from 0; years skip zero."""

    def __init__(self) -> None:
        super().__init__("year 0 does not exist (years go ..., -1, 1, ...)")

class InvalidMonthError(DateCreationError):
    """Raised when a month code lies outside 1..12."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"month must be in 1..12, got {code}")

class InvalidDayError(DateCreationError):
    """Raised when a day-of-month lies outside the month's range."""

    def __init__(self, day: int, max_day: int | None = None) -> None:
        self.day = day
        self.max_day = max_day
        if max_day is None:
            msg = f"invalid day of month: {day}"
        else:
            msg = f"day must be in 1..{max_day}, got {day}"
        super().__init__(msg)

class UnknownCalendarError(CalconvError, KeyError):
    """Raised when a calendar name is not in the registry."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
