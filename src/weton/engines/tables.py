"""
weton.engines.tables
--------------------
Fixed name tables for the two Javanese day cycles, plus their neptu values.

Index order is part of the calibration of the congruence: index 0 of the
weekday table is Monday (Senen) and index 0 of the pasaran table is Pon.
"""

from __future__ import annotations

from typing import Tuple

WEEKDAYS: Tuple[str, ...] = ("Senen", "Selasa", "Rebo", "Kemis", "Jemuwah", "Setu", "Ngahad")
PASARAN: Tuple[str, ...] = ("Pon", "Wage", "Kliwon", "Legi", "Pahing")

# Same order as the name tables above.
NEPTU_WEEKDAY: Tuple[int, ...] = (4, 3, 7, 8, 6, 9, 5)
NEPTU_PASARAN: Tuple[int, ...] = (7, 4, 8, 5, 9)

CYCLE_LENGTH = len(WEEKDAYS) * len(PASARAN)  # 35


def weekday_name(i: int) -> str:
    return WEEKDAYS[i % len(WEEKDAYS)]


def pasaran_name(i: int) -> str:
    return PASARAN[i % len(PASARAN)]


def cycle_index(weekday: int, pasaran: int) -> int:
    """Unique k in [0, 35) with k % 7 == weekday and k % 5 == pasaran."""
    # 15 = 1 (mod 7), 0 (mod 5); 21 = 0 (mod 7), 1 (mod 5)
    return (15 * weekday + 21 * pasaran) % CYCLE_LENGTH
