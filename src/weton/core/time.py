from __future__ import annotations
from datetime import date
from typing import Tuple


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def is_valid_date(day: int, month: int, year: int) -> bool:
    """True for a real proleptic Gregorian date (astronomical year numbering)."""
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)


def to_jdn(day: int, month: int, year: int) -> int:
    """Convert a proleptic Gregorian date to its Julian Day Number (JDN)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn. Returns (day, month, year)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return day, month, year


def date_to_jdn(d: date) -> int:
    return to_jdn(d.day, d.month, d.year)


def jdn_to_date(jdn: int) -> date:
    day, month, year = from_jdn(jdn)
    return date(year, month, day)
