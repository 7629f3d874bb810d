# tests/test_diagnostics.py

from datetime import date

import pytest

from weton.diagnostics import cross_check, pretty_month
from weton.engines.zeller import weton_key
import weton


def test_cross_check_reports_known_divergence(capsys):
    rc = cross_check.main(["--start", "1999-12-01", "--end", "2000-03-31", "--all"])
    assert rc == 0
    assert "Known divergences (Jan/Feb of years divisible by 400): 60" in capsys.readouterr().out


def test_cross_check_sampled(capsys):
    assert cross_check.main(["--N", "2000", "--seed", "1"]) == 0


def test_is_known_divergence():
    assert cross_check.is_known_divergence(date(2000, 2, 29))
    assert not cross_check.is_known_divergence(date(2000, 3, 1))
    assert not cross_check.is_known_divergence(date(1900, 1, 1))


def test_month_weeks_layout():
    rows = weton.month_table(2024, 1)
    weeks = pretty_month.month_weeks(rows)
    # 1 January 2024 is Senen, so no padding in the first week
    assert weeks[0][0][0].strip() == "1"
    assert all(len(wk) == 7 for wk in weeks)
    assert len(weeks) == 5


def test_vectorized_keys_match_scalar():
    np = pytest.importorskip("numpy")
    from weton.diagnostics import distribution

    triples = [(17, 8, 1945), (1, 1, 2000), (1, 1, 2024), (-2000, 8, 1945), (15, 3, -250), (1, 6, -1)]
    d, m, y = zip(*triples)
    keys = distribution.weton_keys(np, d, m, y)
    assert [int(k) for k in keys] == [weton_key(*t) for t in triples]


def test_tally_counts_every_day():
    np = pytest.importorskip("numpy")
    from weton.diagnostics import distribution

    counts = distribution.tally(np, 2024, 2024)
    assert counts.shape == (7, 5)
    assert int(counts.sum()) == 366


def test_distribution_main(capsys):
    pytest.importorskip("numpy")
    from weton.diagnostics import distribution

    assert distribution.main(["--start-year", "2001", "--end-year", "2001"]) == 0
    out = capsys.readouterr().out
    assert "total days: 365" in out
    # 365 = 10 * 35 + 15
    assert "min: 10  max: 11" in out
