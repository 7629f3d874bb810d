from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Sequence

from ..core.types import DayInfo
from ..core.time import is_valid_date, to_jdn

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def list_attributes() -> list[str]:
    return sorted(_REGISTRY)

def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](info))
    return out

# helper for attribute implementations
def jdn(info: DayInfo) -> Optional[int]:
    d = info.civil_date
    if not is_valid_date(d.day, d.month, d.year):
        return None
    return to_jdn(d.day, d.month, d.year)
