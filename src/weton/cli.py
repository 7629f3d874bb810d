from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect

from weton.core.errors import MalformedArgumentError, WetonError


USAGE = "Usage: weton DAY MONTH YEAR."

# atoi(): optional C whitespace, optional sign, then as many ASCII digits as there are
_ATOI_RE = re.compile(r"^[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_RE = re.compile(r"^[ \t\n\v\f\r]*[+-]?[0-9]+[ \t\n\v\f\r]*$")


def atoi(s: str) -> int:
    """Lenient integer parse: leading integer prefix, 0 if there is none."""
    mt = _ATOI_RE.match(s)
    return int(mt.group(1)) if mt else 0


def parse_int_strict(s: str) -> int:
    if not _INT_RE.match(s):
        raise MalformedArgumentError(f"malformed argument '{s}'")
    return int(s)


def _parse_dmy(values: list[str], strict: bool) -> tuple[int, int, int]:
    conv = parse_int_strict if strict else atoi
    d, m, y = (conv(v) for v in values)
    return d, m, y


def _parse_iso(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got '{s}'") from e


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_weton(argv: list[str]) -> int:
    """`weton DAY MONTH YEAR`: extra arguments are ignored."""
    import weton

    if len(argv) < 3:
        print(USAGE)
        return 1

    d, m, y = (atoi(a) for a in argv[:3])
    wt = weton.weton(d, m, y)
    print(f"~ {wt.weekday_name} {wt.pasaran_name} ~")
    return 0


def _add_date_args(p: argparse.ArgumentParser) -> None:
    import weton

    p.add_argument("day")
    p.add_argument("month")
    p.add_argument("year")
    p.add_argument("--engine", default="zeller", choices=weton.list_engines())
    p.add_argument("--strict", action="store_true",
                   help="Reject malformed numbers instead of reading them as 0.")


def cmd_day(argv: list[str]) -> int:
    import weton
    from weton.attributes.registry import list_attributes

    p = argparse.ArgumentParser(prog="weton-tools day", description="Gregorian date -> weton label")
    _add_date_args(p)
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], choices=list_attributes(),
                   help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d, m, y = _parse_dmy([args.day, args.month, args.year], args.strict)
    info = weton.day_info(d, m, y, engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    print(f"~ {info.weton.label} ~")
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")
    if info.debug:
        print(f"  debug = {info.debug}")
    return 0


def cmd_explain(argv: list[str]) -> int:
    import weton

    p = argparse.ArgumentParser(prog="weton-tools explain", description="Show the intermediate values behind a weton.")
    _add_date_args(p)
    args = p.parse_args(argv)

    d, m, y = _parse_dmy([args.day, args.month, args.year], args.strict)
    ex = weton.explain(d, m, y, engine=args.engine)
    for k, v in ex.items():
        if isinstance(v, dict):
            print(f"{k}:")
            for k2, v2 in v.items():
                print(f"  {k2:<13} = {v2}")
        else:
            print(f"{k:<15} = {v}")
    return 0


def cmd_next(argv: list[str]) -> int:
    import weton

    p = argparse.ArgumentParser(prog="weton-tools next", description="Upcoming dates with a given weton.")
    p.add_argument("weekday", help="Senen|Selasa|Rebo|Kemis|Jemuwah|Setu|Ngahad")
    p.add_argument("pasaran", help="Pon|Wage|Kliwon|Legi|Pahing")
    p.add_argument("--after", type=_parse_iso, default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--count", type=int, default=1)
    p.add_argument("--engine", default="zeller", choices=weton.list_engines())
    args = p.parse_args(argv)

    if args.count < 1:
        print("Error: --count must be at least 1.", file=sys.stderr)
        return 2

    d = args.after or date.today()
    for _ in range(args.count):
        d = weton.next_occurrence(args.weekday, args.pasaran, d, engine=args.engine)
        print(f"{d.isoformat()}  ~ {weton.weton(d.day, d.month, d.year, engine=args.engine)} ~")
    return 0


def cmd_engines(argv: list[str]) -> int:
    import weton

    argparse.ArgumentParser(prog="weton-tools engines", description="List available engines.").parse_args(argv)
    for name in weton.list_engines():
        print(name)
        for k, v in weton.engine_info(name).items():
            print(f"  {k}: {v}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """`weton DAY MONTH YEAR`. Every argument list goes through the positional form."""
    if argv is None:
        argv = sys.argv[1:]
    return cmd_weton(argv)


def tools_main(argv: list[str] | None = None) -> int:
    """`weton-tools`: subcommands on top of the calculator."""
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="weton-tools", description="Javanese weton (weekday + pasaran) toolkit.",
                                epilog="Plain lookup: weton DAY MONTH YEAR")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian date -> weton label, with attributes", add_help=False)
    sub.add_parser("explain", help="Show the intermediate congruence values", add_help=False)
    sub.add_parser("month", help="Print a Gregorian month with weton labels", add_help=False)
    sub.add_parser("next", help="Find upcoming dates with a given weton", add_help=False)
    sub.add_parser("engines", help="List available engines", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["cross-check", "distribution"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    try:
        if args.cmd == "day":
            return cmd_day(rest)

        if args.cmd == "explain":
            return cmd_explain(rest)

        if args.cmd == "month":
            return _run_module_main("weton.diagnostics.pretty_month", rest)

        if args.cmd == "next":
            return cmd_next(rest)

        if args.cmd == "engines":
            return cmd_engines(rest)

        if args.cmd == "diag":
            tool_map = {
                "cross-check": "weton.diagnostics.cross_check",
                "distribution": "weton.diagnostics.distribution",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except WetonError as e:
        print(f"weton-tools: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
