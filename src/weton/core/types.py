from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

@dataclass(frozen=True)
class EngineId:
    name: str
    version: str

@dataclass(frozen=True)
class CivilDate:
    """Proleptic Gregorian (day, month, year). No range checks."""
    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}-{self.month}-{self.year}"

@dataclass(frozen=True)
class Weton:
    weekday: int  # 0..6, Senen first
    pasaran: int  # 0..4, Pon first

    @property
    def weekday_name(self) -> str:
        from ..engines.tables import WEEKDAYS
        return WEEKDAYS[self.weekday]

    @property
    def pasaran_name(self) -> str:
        from ..engines.tables import PASARAN
        return PASARAN[self.pasaran]

    @property
    def label(self) -> str:
        return f"{self.weekday_name} {self.pasaran_name}"

    def __str__(self) -> str:
        return self.label

@dataclass(frozen=True)
class DayInfo:
    civil_date: CivilDate
    engine: EngineId
    weton: Weton
    key: int
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
