"""
lunarcal.engines.month
----------------------
Fixed-size Monday-first month grid: leading days of the previous month,
the month itself, then trailing days of the next month up to 42 cells.
"""

from __future__ import annotations

from datetime import date
from typing import AbstractSet, List, Sequence

from lunarcal.core.time import (
    add_days,
    first_of_month,
    last_of_month,
    sunday_based_weekday,
    to_monday_first_offset,
)
from lunarcal.core.types import CustomHolidayRange, DayRecord, MonthGrid
from lunarcal.engines.merge import merge_day
from lunarcal.engines.resolver import BaseDayResolver

GRID_CELLS = 42


def month_offset(month: date) -> int:
    """Number of leading cells before day 1 in a Monday-first grid."""
    return to_monday_first_offset(sunday_based_weekday(first_of_month(month)))


def build_month(
    month: date,
    resolver: BaseDayResolver,
    ranges: Sequence[CustomHolidayRange] = (),
    marked: AbstractSet[str] = frozenset(),
    *,
    cells: int = GRID_CELLS,
) -> MonthGrid:
    first = first_of_month(month)
    last = last_of_month(month)
    offset = month_offset(first)

    def record(d: date, current: bool) -> DayRecord:
        return merge_day(resolver.resolve(d, current), ranges, marked)

    days: List[DayRecord] = []
    for i in range(offset, 0, -1):
        days.append(record(add_days(first, -i), False))
    for day in range(1, last.day + 1):
        days.append(record(first.replace(day=day), True))
    for i in range(1, cells - len(days) + 1):
        days.append(record(add_days(last, i), False))

    return MonthGrid(month=first, offset=offset, days=tuple(days))
