from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional, Type

from .core.calendar import Calendar, convert as _convert
from .core.registry import CalendarRegistry
from .core.types import CalendarInfo, StandardCalendar

logger = logging.getLogger(__name__)

DEFAULT_CALENDAR = "gregorian"
_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(name: str = DEFAULT_CALENDAR) -> Type[Calendar]:
    return _reg().get(name)

def calendar_info(name: str = DEFAULT_CALENDAR) -> CalendarInfo:
    cls = _reg().get(name)
    meta: Dict[str, Any] = {}
    doc = (cls.__doc__ or "").strip()
    if doc:
        meta["doc"] = doc.splitlines()[0]
    return CalendarInfo(
        name=name,
        type_name=f"{cls.__module__}.{cls.__qualname__}",
        reference_date=str(cls.reference_date()),
        meta=meta,
    )

def register_calendar(name: str, cls: Type[Calendar], *, overwrite: bool = False) -> None:
    _reg().register(name, cls, overwrite=overwrite)

# ============================================================
# Dates
# ============================================================

def make_date(year: int, month: int, day: int, *, calendar: str = DEFAULT_CALENDAR) -> Calendar:
    cls = _reg().get(calendar)
    if hasattr(cls, "from_parts"):
        return cls.from_parts(year, month, day)
    return cls(year, month, day)

def to_standard(d: Calendar) -> StandardCalendar:
    return d.to_standard()

def from_standard(days: int | StandardCalendar, *, calendar: str = DEFAULT_CALENDAR) -> Calendar:
    std = days if isinstance(days, StandardCalendar) else StandardCalendar(days)
    return _reg().get(calendar).from_standard(std)

def convert(d: Calendar, *, to: str = DEFAULT_CALENDAR) -> Calendar:
    target = _reg().get(to)
    out = _convert(d, target)
    logger.debug("converted %s (%s) -> %s (%s)", d, type(d).__name__, out, to)
    return out

def days_between(first: Calendar, second: Calendar) -> int:
    if type(first) is not type(second):
        # Different calendars: compare on the shared day count.
        return abs(second.to_standard() - first.to_standard())
    return type(first).days_between(first, second)

def add_days(d: Calendar, days: int) -> Calendar:
    """Shifted copy of ``d``; the argument is left untouched."""
    out = copy.copy(d)
    out.add_days(days)
    return out

def is_leap_year(year: int, *, calendar: str = DEFAULT_CALENDAR) -> bool:
    from .core.types import Year
    return _reg().get(calendar).is_leap_year(Year.try_from(year))
