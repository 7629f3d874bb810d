"""
weton.engines.jdn
-----------------
Reference engine: weekday and pasaran read straight off the Julian Day
Number. Independent of the congruence, so the two can be checked against
each other. Only real Gregorian dates are accepted.
"""

from __future__ import annotations

from typing import Any, Dict

from weton.core.errors import InvalidDateError
from weton.core.time import is_valid_date, to_jdn
from weton.core.types import CivilDate, DayInfo, EngineId, Weton
from weton.engines.tables import PASARAN, WEEKDAYS

# JDN 0 is a Monday (Senen). JDN 2431685 (17 August 1945) is Legi.
WEEKDAY_OFFSET = 0
PASARAN_OFFSET = 3


class JdnEngine:
    def __init__(self, id: EngineId | None = None):
        self.id = id or EngineId(name="jdn", version="1")

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "method": "Julian Day Number residues",
            "weekday_offset": WEEKDAY_OFFSET,
            "pasaran_offset": PASARAN_OFFSET,
            "validates_dates": True,
        }

    def key(self, day: int, month: int, year: int) -> int:
        if not is_valid_date(day, month, year):
            raise InvalidDateError(f"Not a Gregorian date: {day}-{month}-{year}")
        return to_jdn(day, month, year)

    def weton(self, day: int, month: int, year: int) -> Weton:
        jdn = self.key(day, month, year)
        return Weton(
            weekday=(jdn + WEEKDAY_OFFSET) % len(WEEKDAYS),
            pasaran=(jdn + PASARAN_OFFSET) % len(PASARAN),
        )

    def day_info(self, day: int, month: int, year: int, *, debug: bool = False) -> DayInfo:
        jdn = self.key(day, month, year)
        return DayInfo(
            civil_date=CivilDate(day, month, year),
            engine=self.id,
            weton=self.weton(day, month, year),
            key=jdn,
            debug={"jdn": jdn} if debug else None,
        )

    def explain(self, day: int, month: int, year: int) -> Dict[str, Any]:
        wt = self.weton(day, month, year)
        jdn = self.key(day, month, year)
        return {
            "engine": self.id.name,
            "date": {"day": day, "month": month, "year": year},
            "jdn": jdn,
            "key": jdn,
            "weekday": wt.weekday,
            "pasaran": wt.pasaran,
            "label": wt.label,
        }
