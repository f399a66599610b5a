"""calconv public API.

Keep this surface small: users should mostly interact with the date types and
the functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    DEFAULT_CALENDAR,
    list_calendars,
    get_calendar,
    calendar_info,
    register_calendar,
    make_date,
    to_standard,
    from_standard,
    convert,
    days_between,
    add_days,
    is_leap_year,
)
from .calendars.gregorian import GregorianDate
from .core.calendar import Calendar
from .core.errors import (
    CalconvError,
    DateCreationError,
    ZeroYearError,
    InvalidMonthError,
    InvalidDayError,
    UnknownCalendarError,
)
from .core.types import Month, StandardCalendar, Year

__all__ = [
    "DEFAULT_CALENDAR",
    "list_calendars",
    "get_calendar",
    "calendar_info",
    "register_calendar",
    "make_date",
    "to_standard",
    "from_standard",
    "convert",
    "days_between",
    "add_days",
    "is_leap_year",
    "Calendar",
    "GregorianDate",
    "Month",
    "StandardCalendar",
    "Year",
    "CalconvError",
    "DateCreationError",
    "ZeroYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "UnknownCalendarError",
]
