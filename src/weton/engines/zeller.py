"""
weton.engines.zeller
--------------------
Weekday and pasaran from Zeller's congruence, following the five-term
reduction of Karjanto & Beauducel (2020).

All divisions truncate toward zero. Python's ``//`` and ``%`` floor instead,
which changes the result whenever an intermediate is negative (negative
years, and the reduced year ``-1`` produced by the January/February
borrow), so the truncating helpers below are used throughout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from weton.core.types import CivilDate, DayInfo, EngineId, Weton
from weton.engines.tables import PASARAN, WEEKDAYS


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder matching _tdiv; takes the sign of the dividend."""
    return a - b * _tdiv(a, b)


@dataclass(frozen=True)
class CongruenceState:
    century: int
    year: int   # year of century, after the Jan/Feb borrow
    month: int  # shifted month: 4..14 for Mar..Dec, 14/15 for Jan/Feb

    def as_dict(self) -> Dict[str, int]:
        return {"century": self.century, "year": self.year, "month": self.month}


def congruence_state(day: int, month: int, year: int) -> CongruenceState:
    century = _tdiv(year, 100)
    y = _tmod(year, 100)

    # January and February count as months 14 and 15 of the previous year.
    if month < 3:
        y -= 1
        m = month + 13
    else:
        m = month + 1

    return CongruenceState(century=century, year=y, month=m)


def weton_key(day: int, month: int, year: int) -> int:
    """The congruence value w. Only its residues mod 7 and mod 5 carry meaning."""
    s = congruence_state(day, month, year)
    return (
        day
        + _tdiv(153 * s.month, 5)
        + 15 * s.year
        + _tdiv(s.year, 4)
        + 19 * s.century
        + _tdiv(s.century, 4)
        + 5
    )


def weton_from_key(w: int) -> Weton:
    # % on a positive modulus is never negative in Python, so any w is a valid index.
    return Weton(weekday=w % len(WEEKDAYS), pasaran=w % len(PASARAN))


def weton_indices(day: int, month: int, year: int) -> tuple[int, int]:
    """(weekday index 0..6, pasaran index 0..4) for any integer triple."""
    wt = weton_from_key(weton_key(day, month, year))
    return wt.weekday, wt.pasaran


class ZellerEngine:
    """
    Total over all integer (day, month, year) triples: impossible dates such
    as 31 April or month 0 still produce a weton.
    """
    def __init__(self, id: EngineId | None = None):
        self.id = id or EngineId(name="zeller", version="1")

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "method": "Zeller congruence (Karjanto & Beauducel 2020)",
            "division": "truncating",
            "validates_dates": False,
        }

    def key(self, day: int, month: int, year: int) -> int:
        return weton_key(day, month, year)

    def weton(self, day: int, month: int, year: int) -> Weton:
        return weton_from_key(weton_key(day, month, year))

    def day_info(self, day: int, month: int, year: int, *, debug: bool = False) -> DayInfo:
        w = weton_key(day, month, year)
        dbg = None
        if debug:
            dbg = {"state": congruence_state(day, month, year).as_dict(), "key": w}
        return DayInfo(
            civil_date=CivilDate(day, month, year),
            engine=self.id,
            weton=weton_from_key(w),
            key=w,
            debug=dbg,
        )

    def explain(self, day: int, month: int, year: int) -> Dict[str, Any]:
        s = congruence_state(day, month, year)
        w = weton_key(day, month, year)
        wt = weton_from_key(w)
        return {
            "engine": self.id.name,
            "date": {"day": day, "month": month, "year": year},
            "state": s.as_dict(),
            "terms": {
                "day": day,
                "month": _tdiv(153 * s.month, 5),
                "year": 15 * s.year,
                "leap": _tdiv(s.year, 4),
                "century": 19 * s.century,
                "century_leap": _tdiv(s.century, 4),
                "offset": 5,
            },
            "key": w,
            "weekday": wt.weekday,
            "pasaran": wt.pasaran,
            "label": wt.label,
        }
