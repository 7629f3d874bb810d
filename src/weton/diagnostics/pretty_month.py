from __future__ import annotations

from datetime import date
import argparse

import weton


def dow_header() -> str:
    return "  ".join(f"{n[:7]:<7}" for n in weton.WEEKDAYS).rstrip()


def cell(top: str, bot: str, w: int = 7) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print("  ".join(c[0] for c in wk).rstrip())
        print("  ".join(c[1] for c in wk).rstrip())
    print()


def month_weeks(rows: list[tuple[date, weton.Weton]]) -> list[list[tuple[str, str]]]:
    """Lay rows out in Senen-first weeks. Columns follow the weton weekday."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    if rows:
        pad = rows[0][1].weekday
        for _ in range(pad):
            wk.append(cell("", ""))
    for d, wt in rows:
        wk.append(cell(f"{d.day:2d}", wt.pasaran_name))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def gregorian_month_calendar(engine: str, gy: int, gm: int) -> None:
    rows = weton.month_table(gy, gm, engine=engine)
    print_grid(f"{engine}  {gy}-{gm:02d}", month_weeks(rows))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="weton-tools month",
        description="Print a Gregorian month calendar with the pasaran of each day.",
    )
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--engine", default="zeller", choices=weton.list_engines())
    args = p.parse_args(argv)

    if not 1 <= args.month <= 12:
        p.error("month must be in 1..12")
    if not 1 <= args.year <= 9999:
        p.error("year must be in 1..9999")

    gregorian_month_calendar(args.engine, gy=args.year, gm=args.month)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
