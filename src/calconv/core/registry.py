from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Type

from .calendar import Calendar
from .errors import UnknownCalendarError

logger = logging.getLogger(__name__)

_REQUIRED = ("reference_date", "to_standard", "from_standard", "is_leap_year", "add_days", "days_between")


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, Type[Calendar]] = field(default_factory=dict)

    def get(self, name: str) -> Type[Calendar]:
        if name not in self._calendars:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def name_of(self, cls: type) -> str:
        for name, registered in self._calendars.items():
            if registered is cls:
                return name
        raise UnknownCalendarError(f"Calendar type {cls.__name__} is not registered")

    def register(self, name: str, cls: Type[Calendar], *, overwrite: bool = False) -> None:
        missing = [m for m in _REQUIRED if not hasattr(cls, m)]
        if missing:
            raise TypeError(f"{cls!r} does not implement the calendar contract (missing: {missing})")
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = cls
        logger.debug("registered calendar %r -> %s", name, cls.__qualname__)
