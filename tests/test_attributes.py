# tests/test_attributes.py

import pytest

import weton
from weton.attributes.registry import compute_attributes, list_attributes
from weton.engines.tables import NEPTU_PASARAN, NEPTU_WEEKDAY, PASARAN, WEEKDAYS, cycle_index


def test_tables():
    assert WEEKDAYS == ("Senen", "Selasa", "Rebo", "Kemis", "Jemuwah", "Setu", "Ngahad")
    assert PASARAN == ("Pon", "Wage", "Kliwon", "Legi", "Pahing")
    assert len(NEPTU_WEEKDAY) == len(WEEKDAYS)
    assert len(NEPTU_PASARAN) == len(PASARAN)


def test_cycle_index_is_crt():
    seen = set()
    for w in range(7):
        for p in range(5):
            k = cycle_index(w, p)
            assert k % 7 == w and k % 5 == p
            seen.add(k)
    assert seen == set(range(35))


def test_registered_attributes():
    assert list_attributes() == ["cycle", "jdn", "neptu"]


def test_jdn_attribute():
    info = weton.day_info(1, 1, 2000, attributes=("jdn",))
    assert info.attributes == {"jdn": 2451545}
    # the congruence accepts dates the calendar does not have
    info = weton.day_info(31, 4, 2024, attributes=("jdn",))
    assert info.attributes == {"jdn": None}


def test_neptu_range():
    # classical range of weton neptu is 7..18
    for w in range(7):
        for p in range(5):
            info = weton.day_info(1 + cycle_index(w, p), 1, 2024, attributes=("neptu",))
            assert 7 <= info.attributes["neptu"] <= 18


def test_unknown_attribute():
    info = weton.day_info(1, 1, 2024)
    with pytest.raises(KeyError, match="Unknown attribute"):
        compute_attributes(info, ["wuku"])
