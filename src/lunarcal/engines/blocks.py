"""
lunarcal.engines.blocks
-----------------------
Visual holiday blocks over a month grid.

A block is a run of same-named holiday days. In the 7-column layout a block
never wraps across rows, so Monday always opens a segment and Sunday always
closes one, even when the holiday itself continues.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from lunarcal.core.types import BlockEdges, DayRecord

NO_EDGES = BlockEdges()


def _continues(day: DayRecord, other: Optional[DayRecord]) -> bool:
    return other is not None and other.is_holiday and other.holiday_name == day.holiday_name


def day_edges(day: DayRecord, prev: Optional[DayRecord], nxt: Optional[DayRecord]) -> BlockEdges:
    if not day.is_holiday:
        return NO_EDGES
    holiday_start = not _continues(day, prev)
    holiday_end = not _continues(day, nxt)
    weekday = day.date.weekday()
    return BlockEdges(
        holiday_start=holiday_start,
        holiday_end=holiday_end,
        block_start=holiday_start or weekday == 0,
        block_end=holiday_end or weekday == 6,
        show_name=holiday_start and bool(day.holiday_name),
    )


def block_edges(days: Sequence[DayRecord]) -> Tuple[BlockEdges, ...]:
    n = len(days)
    return tuple(
        day_edges(
            day,
            days[i - 1] if i > 0 else None,
            days[i + 1] if i < n - 1 else None,
        )
        for i, day in enumerate(days)
    )
