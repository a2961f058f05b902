from __future__ import annotations

from datetime import date
import argparse
import unicodedata

import lunarcal
from lunarcal.core.time import add_months
from lunarcal.core.types import BlockEdges, DayRecord
from lunarcal.session import CalendarSession, month_title

CELL_W = 8


def text_width(s: str) -> int:
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in s)


def pad(s: str, w: int = CELL_W) -> str:
    while text_width(s) > w:
        s = s[:-1]
    return s + " " * (w - text_width(s))


def dow_header() -> str:
    return " ".join(pad(f" {d}") for d in "一二三四五六日")


def cell(day: DayRecord, edges: BlockEdges, *, today: date) -> tuple[str, str]:
    """Two text lines per day: date number with badges, then lunar/festival label."""
    left = "[" if edges.block_start else ("=" if day.is_holiday else " ")
    right = "]" if edges.block_end else ("=" if day.is_holiday else " ")
    num = f"{day.date.day:2d}"
    if day.date == today:
        num = f"{num}<"
    badge = "休" if day.is_holiday else ("班" if day.is_work else "")
    mark = "*" if day.is_marked else ""
    top = pad(f"{left}{num}{mark}{badge}", CELL_W - 1) + right
    bot = day.holiday_name if edges.show_name else day.display_label
    if not day.is_current_month:
        bot = f"({bot})"
    return top, pad(f" {bot}")


def render_month(session: CalendarSession, month: date) -> str:
    view = session.month_view(month)
    lines = [month_title(view.grid.month), dow_header(), "-" * text_width(dow_header())]
    cells = [cell(d, e, today=session.today) for d, e in zip(view.grid, view.edges)]
    for row in range(0, len(cells), 7):
        wk = cells[row:row + 7]
        lines.append(" ".join(c[0] for c in wk))
        lines.append(" ".join(c[1] for c in wk))
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Gregorian month grids with lunar labels and holiday blocks."
    )
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 2)")
    p.add_argument("--count", type=int, default=1, help="Number of consecutive months to print.")
    p.add_argument("--provider", default="lunar")
    args = p.parse_args(argv)

    session = lunarcal.make_session(config=lunarcal.SessionConfig(provider=args.provider))
    if args.greg:
        gy, gm = args.greg
        session.jump_to_month(date(gy, gm, 1))

    for i in range(max(args.count, 1)):
        print(render_month(session, add_months(session.active_month, i)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
