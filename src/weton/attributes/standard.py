from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute, jdn
from ..engines.tables import NEPTU_PASARAN, NEPTU_WEEKDAY, cycle_index

def neptu(info) -> Dict[str, Any]:
    nw = NEPTU_WEEKDAY[info.weton.weekday]
    np_ = NEPTU_PASARAN[info.weton.pasaran]
    return {"neptu_weekday": nw, "neptu_pasaran": np_, "neptu": nw + np_}

def julian_day(info) -> Dict[str, Any]:
    # None for dates the calendar does not have (e.g. 31-4-2024)
    return {"jdn": jdn(info)}

def cycle(info) -> Dict[str, Any]:
    return {"cycle": cycle_index(info.weton.weekday, info.weton.pasaran)}

register_attribute("neptu", neptu)
register_attribute("jdn", julian_day)
register_attribute("cycle", cycle)
