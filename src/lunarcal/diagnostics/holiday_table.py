from __future__ import annotations

from datetime import date
import argparse

import lunarcal
from lunarcal.diagnostics.pretty_month import pad


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the built-in public holiday runs and compensatory workdays per year."
    )
    p.add_argument("--from-year", type=int, default=2024)
    p.add_argument("--to-year", type=int, default=2026)
    p.add_argument("--provider", default="lunar")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Holiday", "Start", "End", "Days", "Workdays"]
    colw = [5, 10, 10, 10, 4, 0]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    empty = []
    for Y in range(Y0, Y1 + 1):
        spans = lunarcal.holiday_spans(Y, provider=args.provider)
        if not spans:
            empty.append(Y)
            continue
        for s in spans:
            row = [
                str(Y).ljust(colw[0]),
                pad(s.name, colw[1]),
                fmt(s.start).ljust(colw[2]),
                fmt(s.end).ljust(colw[3]),
                str(s.days).rjust(colw[4]),
                ",".join(fmt(w) for w in s.workdays),
            ]
            print("  ".join(row))

    if empty:
        print(f"\nNo built-in holiday data for: {', '.join(map(str, empty))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
