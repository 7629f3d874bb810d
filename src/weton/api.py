from __future__ import annotations

import calendar as pycal
from dataclasses import replace
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .core.engine import EngineRegistry, WetonEngine
from .core.errors import UnknownNameError, WetonError
from .core.types import DayInfo, Weton
from .attributes.registry import compute_attributes
from .engines.tables import CYCLE_LENGTH, PASARAN, WEEKDAYS

DEFAULT_ENGINE = "zeller"
# Twice the 35-day cycle, so one skipped label cannot hide an occurrence.
SEARCH_WINDOW = 2 * CYCLE_LENGTH

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def register_engine(name: str, engine: WetonEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

def weton(day: int, month: int, year: int, *, engine: str = DEFAULT_ENGINE) -> Weton:
    return _reg().get(engine).weton(day, month, year)

def day_info(
    day: int,
    month: int,
    year: int,
    *,
    engine: str = DEFAULT_ENGINE,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _reg().get(engine).day_info(day, month, year, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(day: int, month: int, year: int, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).explain(day, month, year)

# ============================================================
# Name lookup
# ============================================================

def _lookup(table: Tuple[str, ...], what: str, name: Union[str, int]) -> int:
    if isinstance(name, int):
        if 0 <= name < len(table):
            return name
        raise UnknownNameError(f"{what} index out of range: {name}")
    s = name.strip()
    if s.isdigit() and int(s) < len(table):
        return int(s)
    for i, n in enumerate(table):
        if n.lower() == s.lower():
            return i
    raise UnknownNameError(f"Unknown {what} '{name}'. Expected one of: {', '.join(table)}")

def parse_weekday(name: Union[str, int]) -> int:
    return _lookup(WEEKDAYS, "weekday", name)

def parse_pasaran(name: Union[str, int]) -> int:
    return _lookup(PASARAN, "pasaran", name)

# ============================================================
# Searching by weton
# ============================================================

def _matches(eng: WetonEngine, d: date, wd: int, ps: int) -> bool:
    wt = eng.weton(d.day, d.month, d.year)
    return wt.weekday == wd and wt.pasaran == ps

def next_occurrence(
    weekday: Union[str, int],
    pasaran: Union[str, int],
    after: date,
    *,
    engine: str = DEFAULT_ENGINE,
) -> date:
    """First date strictly after `after` carrying the given weton."""
    eng = _reg().get(engine)
    wd, ps = parse_weekday(weekday), parse_pasaran(pasaran)
    d = after
    for _ in range(SEARCH_WINDOW):
        try:
            d += timedelta(days=1)
        except OverflowError as e:
            raise WetonError(f"No {WEEKDAYS[wd]} {PASARAN[ps]} after {after.isoformat()} before {date.max.isoformat()}") from e
        if _matches(eng, d, wd, ps):
            return d
    raise WetonError(
        f"No {WEEKDAYS[wd]} {PASARAN[ps]} within {SEARCH_WINDOW} days after {after.isoformat()} "
        f"(engine '{engine}')"
    )

def occurrences(
    weekday: Union[str, int],
    pasaran: Union[str, int],
    start: date,
    end: date,
    *,
    engine: str = DEFAULT_ENGINE,
) -> List[date]:
    """All dates in [start, end] carrying the given weton."""
    if end < start:
        raise ValueError("end must be >= start")
    eng = _reg().get(engine)
    wd, ps = parse_weekday(weekday), parse_pasaran(pasaran)
    out = []
    for i in range((end - start).days + 1):
        d = start + timedelta(days=i)
        if _matches(eng, d, wd, ps):
            out.append(d)
    return out

def month_table(year: int, month: int, *, engine: str = DEFAULT_ENGINE) -> List[Tuple[date, Weton]]:
    """(date, Weton) rows for every day of a Gregorian month."""
    eng = _reg().get(engine)
    last = pycal.monthrange(year, month)[1]
    return [(date(year, month, d), eng.weton(d, month, year)) for d in range(1, last + 1)]
