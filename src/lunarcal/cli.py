from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    from lunarcal.core.time import parse_date_key
    try:
        return parse_date_key(s)
    except ValueError as exc:
        raise SystemExit(f"invalid date {s!r}: {exc}") from exc


def _parse_holiday(value: str, idx: int):
    """NAME:START:END -> CustomHolidayRange."""
    from lunarcal import InvalidRangeError, make_custom_range

    parts = value.rsplit(":", 2)
    if len(parts) != 3:
        raise SystemExit(f"--holiday expects NAME:START:END, got {value!r}")
    name, start, end = parts
    try:
        return make_custom_range(str(idx), name, start, end)
    except InvalidRangeError as exc:
        raise SystemExit(f"invalid --holiday {value!r}: {exc}") from exc


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


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


def _add_state_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--holiday", action="append", default=[], metavar="NAME:START:END",
                   help="custom holiday range (repeatable; first match wins)")
    p.add_argument("--mark", action="append", default=[], metavar="YYYY-MM-DD",
                   help="mark a date as important (repeatable)")
    p.add_argument("--today", default=None, help="reference 'today' (YYYY-MM-DD)")


def _session(args):
    import lunarcal

    today = _parse_ymd(args.today) if args.today else None
    session = lunarcal.make_session(today, config=lunarcal.SessionConfig(provider=args.provider))
    for i, value in enumerate(args.holiday, start=1):
        session.custom_holidays.append(_parse_holiday(value, i))
    for s in args.mark:
        session.toggle_mark(_parse_ymd(s))
    return session


def cmd_day(argv: list[str]) -> int:
    import lunarcal
    from lunarcal.session import describe_distance
    from lunarcal.core.time import days_between

    p = argparse.ArgumentParser(prog="lunarcal day", description="Gregorian -> lunar label, festival and holiday status")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--provider", default="lunar")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    d = _parse_ymd(args.date)
    try:
        facts = lunarcal.day_facts(d, provider=args.provider)
    except lunarcal.LunarCalError as exc:
        raise SystemExit(f"error: {exc}") from exc

    status = "holiday" if facts.builtin_is_holiday else ("workday" if facts.builtin_is_work else "-")
    print(f"date      : {facts.key}")
    print(f"lunar     : {facts.lunar_day}")
    print(f"festival  : {facts.festival or '-'}")
    print(f"built-in  : {status} {facts.builtin_holiday_name}".rstrip())
    print(f"from today: {describe_distance(days_between(date.today(), d))}")
    return 0


def cmd_month(argv: list[str]) -> int:
    import lunarcal
    from lunarcal.diagnostics.pretty_month import render_month

    p = argparse.ArgumentParser(prog="lunarcal month", description="Print a Monday-first month grid")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--provider", default="lunar")
    p.add_argument("--verbose", action="store_true")
    _add_state_args(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    if not 1 <= args.month <= 12:
        raise SystemExit("month must be in 1..12")
    session = _session(args)
    try:
        print(render_month(session, date(args.year, args.month, 1)))
    except lunarcal.LunarCalError as exc:
        raise SystemExit(f"error: {exc}") from exc
    return 0


def cmd_progress(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="lunarcal progress", description="Countdown for the holiday in progress")
    p.add_argument("date", nargs="?", default=None, help="reference date YYYY-MM-DD (default: today)")
    p.add_argument("--provider", default="lunar")
    p.add_argument("--scan-limit", type=int, default=None, help="max days scanned per direction")
    p.add_argument("--verbose", action="store_true")
    _add_state_args(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    if args.date and not args.today:
        args.today = args.date
    session = _session(args)
    if args.scan_limit is not None:
        try:
            session.config = session.config.tweak(progress_scan_limit=args.scan_limit)
        except ValueError as exc:
            raise SystemExit(f"invalid --scan-limit: {exc}") from exc

    prog = session.progress()
    if prog is None:
        print(f"{session.today.isoformat()}: no holiday in progress")
        return 0
    print(f"{prog.name}  第 {prog.day_index} 天  还剩 {prog.remaining} 天"
          f"  ({prog.start.isoformat()} .. {prog.end.isoformat()}, {prog.source})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `lunarcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    commands = {
        "day": cmd_day,
        "month": cmd_month,
        "progress": cmd_progress,
        "pretty-month": lambda rest: _run_module_main("lunarcal.diagnostics.pretty_month", rest),
        "holidays": lambda rest: _run_module_main("lunarcal.diagnostics.holiday_table", rest),
    }
    diag_tools = {
        "scatter": "lunarcal.diagnostics.holiday_scatter",
    }

    # Subcommands own their argument parsing; dispatch on the first token.
    if argv and argv[0] in commands:
        return commands[argv[0]](argv[1:])
    if len(argv) >= 2 and argv[0] == "diag" and argv[1] in diag_tools:
        return _run_module_main(diag_tools[argv[1]], argv[2:])

    p = argparse.ArgumentParser(prog="lunarcal", description="Lunar calendar and holiday day-data toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("day", help="Gregorian -> lunar label, festival and holiday status")
    sub.add_parser("month", help="Print a Monday-first month grid with holiday blocks")
    sub.add_parser("progress", help="Countdown for the holiday in progress")
    sub.add_parser("pretty-month", help="Print consecutive month grids (diagnostics)")
    sub.add_parser("holidays", help="Print built-in holiday runs per year (diagnostics)")
    p_diag = sub.add_parser("diag", help="Plotting diagnostics (requires numpy + matplotlib)")
    p_diag.add_argument("tool", choices=sorted(diag_tools), help="Which diagnostic to run")

    # Only reached for help or malformed input; argparse exits with a usage message.
    p.parse_args(argv)
    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
