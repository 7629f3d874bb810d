"""weton public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    weton,
    day_info,
    explain,
    list_engines,
    engine_info,
    register_engine,
    parse_weekday,
    parse_pasaran,
    next_occurrence,
    occurrences,
    month_table,
)
from .core.types import CivilDate, DayInfo, Weton
from .engines.tables import WEEKDAYS, PASARAN

__all__ = [
    "weton",
    "day_info",
    "explain",
    "list_engines",
    "engine_info",
    "register_engine",
    "parse_weekday",
    "parse_pasaran",
    "next_occurrence",
    "occurrences",
    "month_table",
    "CivilDate",
    "DayInfo",
    "Weton",
    "WEEKDAYS",
    "PASARAN",
]
