from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from .types import DayInfo, EngineId, Weton

class WetonEngine(Protocol):
    id: EngineId

    def info(self) -> Dict[str, Any]: ...
    def key(self, day: int, month: int, year: int) -> int: ...
    def weton(self, day: int, month: int, year: int) -> Weton: ...
    def day_info(self, day: int, month: int, year: int, *, debug: bool = False) -> DayInfo: ...
    def explain(self, day: int, month: int, year: int) -> Dict[str, Any]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, WetonEngine]

    def get(self, name: str) -> WetonEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: WetonEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
