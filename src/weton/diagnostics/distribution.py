#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import weton
from weton.core.time import days_in_month


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "weton[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "weton[diagnostics]"') from e


def _tdiv(np, a, b):
    """Elementwise integer division truncating toward zero."""
    q = np.abs(a) // np.abs(b)
    return np.where((a < 0) == (b < 0), q, -q)


def weton_keys(np, days, months, years):
    """Vectorized congruence; same arithmetic as weton.engines.zeller.weton_key."""
    d = np.asarray(days, dtype=np.int64)
    m = np.asarray(months, dtype=np.int64)
    y = np.asarray(years, dtype=np.int64)

    c = _tdiv(np, y, 100)
    y = y - 100 * c
    early = m < 3
    y = np.where(early, y - 1, y)
    m = np.where(early, m + 13, m + 1)
    return d + _tdiv(np, 153 * m, 5) + 15 * y + _tdiv(np, y, 4) + 19 * c + _tdiv(np, c, 4) + 5


def date_columns(np, start_year: int, end_year: int):
    ds: List[int] = []
    ms: List[int] = []
    ys: List[int] = []
    for Y in range(start_year, end_year + 1):
        for M in range(1, 13):
            n = days_in_month(Y, M)
            ds.extend(range(1, n + 1))
            ms.extend([M] * n)
            ys.extend([Y] * n)
    return np.array(ds, dtype=np.int64), np.array(ms, dtype=np.int64), np.array(ys, dtype=np.int64)


def tally(np, start_year: int, end_year: int):
    """7x5 count matrix: rows are weekdays, columns are pasaran."""
    ds, ms, ys = date_columns(np, start_year, end_year)
    w = weton_keys(np, ds, ms, ys)
    counts = np.zeros((len(weton.WEEKDAYS), len(weton.PASARAN)), dtype=np.int64)
    np.add.at(counts, (w % 7, w % 5), 1)
    return counts


def print_table(counts) -> None:
    print(" " * 9 + "".join(f"{p:>8}" for p in weton.PASARAN))
    for i, name in enumerate(weton.WEEKDAYS):
        print(f"{name:<9}" + "".join(f"{int(v):8d}" for v in counts[i]))


def plot(counts, out: str, title: str) -> None:
    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(6, 6))
    im = ax.imshow(counts, cmap="viridis")
    ax.set_xticks(range(len(weton.PASARAN)), labels=weton.PASARAN)
    ax.set_yticks(range(len(weton.WEEKDAYS)), labels=weton.WEEKDAYS)
    ax.set_title(title)
    fig.colorbar(im, ax=ax, shrink=0.8)
    fig.tight_layout()
    fig.savefig(out, dpi=150)
    plt.close(fig)
    print(f"Wrote {out}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="weton-tools diag distribution",
                                description="Count how often each of the 35 wetons occurs in a year range.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2099)
    p.add_argument("--out", default=None, help="Write a heatmap PNG here (needs matplotlib).")
    p.add_argument("--title", default="Weton frequency")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    counts = tally(np, args.start_year, args.end_year)
    print_table(counts)
    print(f"total days: {int(counts.sum())}  min: {int(counts.min())}  max: {int(counts.max())}")

    if args.out:
        plot(counts, args.out, f"{args.title} {args.start_year}-{args.end_year}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
