from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import weton


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def is_known_divergence(d: date) -> bool:
    """
    January/February of a year divisible by 400: the truncating congruence
    borrows into year -1 of the same century and lands one day late.
    """
    return d.month < 3 and d.year % 400 == 0


def compare(d: date, a: str = "zeller", b: str = "jdn") -> tuple[weton.Weton, weton.Weton]:
    return (
        weton.weton(d.day, d.month, d.year, engine=a),
        weton.weton(d.day, d.month, d.year, engine=b),
    )


def cross_check(
    dates,
    *,
    max_failures: int,
    verbose: bool = False,
) -> tuple[int, int]:
    """Returns (unexpected mismatches, known divergences)."""
    failures = 0
    known = 0
    for d in dates:
        wa, wb = compare(d)
        if wa == wb:
            continue
        if is_known_divergence(d):
            known += 1
            if verbose:
                print(f"known   {d.isoformat()}  zeller={wa}  jdn={wb}")
            continue
        failures += 1
        print("\nFAIL")
        print("date:", d.isoformat())
        print("zeller:", wa, weton.explain(d.day, d.month, d.year, engine="zeller"))
        print("jdn:", wb, weton.explain(d.day, d.month, d.year, engine="jdn"))
        if failures >= max_failures:
            break
    return failures, known


def every_day(start: date, end: date):
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="weton-tools diag cross-check",
                                description="Compare the congruence against the JDN reference engine.")
    p.add_argument("--N", type=int, default=20000, help="Random trials.")
    p.add_argument("--start", type=str, default="0001-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--all", action="store_true", help="Check every day in [start, end] instead of sampling.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    p.add_argument("--verbose", action="store_true", help="Also list known divergences.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    if args.all:
        dates = every_day(start, end)
    else:
        random.seed(args.seed)
        dates = (random_date(start, end) for _ in range(args.N))

    failures, known = cross_check(dates, max_failures=args.max_failures, verbose=args.verbose)

    if failures == 0:
        print(f"Engines agree. Known divergences (Jan/Feb of years divisible by 400): {known}")
        return 0

    print(f"Cross-check failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
