from __future__ import annotations
from calconv.core.registry import CalendarRegistry
from calconv.calendars.gregorian import GregorianDate

BUILTIN_CALENDARS = {
    "gregorian": GregorianDate,
}

def build_registry() -> CalendarRegistry:
    reg = CalendarRegistry()
    for name, cls in BUILTIN_CALENDARS.items():
        reg.register(name, cls)
    return reg
