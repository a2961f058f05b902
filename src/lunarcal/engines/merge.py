"""
lunarcal.engines.merge
----------------------
Combines immutable BaseDayFacts with user state into a render-ready DayRecord.

Custom holiday ranges are an ordered sequence and may overlap: the first
range (in insertion order) containing the date wins and overrides the
built-in status entirely, including cancelling a built-in workday.
"""

from __future__ import annotations

from typing import AbstractSet, Optional, Sequence

from lunarcal.core.types import BaseDayFacts, CustomHolidayRange, DayRecord


def find_range(key: str, ranges: Sequence[CustomHolidayRange]) -> Optional[CustomHolidayRange]:
    for r in ranges:
        if r.contains(key):
            return r
    return None


def merge_day(
    base: BaseDayFacts,
    ranges: Sequence[CustomHolidayRange],
    marked: AbstractSet[str],
) -> DayRecord:
    is_holiday = base.builtin_is_holiday
    is_work = base.builtin_is_work
    holiday_name = base.builtin_holiday_name

    custom = find_range(base.key, ranges)
    if custom is not None:
        is_holiday = True
        is_work = False
        holiday_name = custom.name

    return DayRecord(
        date=base.date,
        key=base.key,
        is_current_month=base.is_current_month,
        lunar_day=base.lunar_day,
        festival=base.festival,
        builtin_is_holiday=base.builtin_is_holiday,
        builtin_is_work=base.builtin_is_work,
        builtin_holiday_name=base.builtin_holiday_name,
        is_holiday=is_holiday,
        is_work=is_work,
        holiday_name=holiday_name,
        is_marked=base.key in marked,
    )
