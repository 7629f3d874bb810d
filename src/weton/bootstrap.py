from __future__ import annotations
from weton.core.engine import EngineRegistry
from weton.engines.jdn import JdnEngine
from weton.engines.zeller import ZellerEngine

def build_registry() -> EngineRegistry:
    engines = {}
    for eng in (ZellerEngine(), JdnEngine()):
        engines[eng.id.name] = eng
    return EngineRegistry(engines)
