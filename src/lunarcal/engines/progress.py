"""
lunarcal.engines.progress
-------------------------
Countdown for the holiday in progress on a reference date.

Custom ranges take precedence. Otherwise the provider's built-in holiday run
is found by walking outward one day at a time while the neighbour is a
non-workday holiday with the same name.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from lunarcal.core.provider import Provider
from lunarcal.core.time import add_days, date_key, days_between
from lunarcal.core.types import CustomHolidayRange, HolidayProgress
from lunarcal.engines.merge import find_range

logger = logging.getLogger(__name__)

DEFAULT_SCAN_LIMIT = 30


def _progress(name: str, reference: date, start: date, end: date, source: str) -> HolidayProgress:
    total = days_between(start, end) + 1
    day_index = days_between(start, reference) + 1
    return HolidayProgress(
        name=name,
        day_index=day_index,
        remaining=total - day_index,
        start=start,
        end=end,
        source=source,
    )


def _same_holiday(provider: Provider, d: date, name: str) -> bool:
    h = provider.built_in_holiday(d)
    return h is not None and not h.is_workday and h.name == name


def _scan(provider: Provider, reference: date, name: str, step: int, limit: int) -> Optional[date]:
    """Last day of the run in direction `step`, or None if it runs past `limit` days."""
    edge = reference
    for _ in range(limit + 1):
        candidate = add_days(edge, step)
        if not _same_holiday(provider, candidate, name):
            return edge
        edge = candidate
    return None


def builtin_span(
    provider: Provider,
    reference: date,
    *,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
) -> Optional[tuple[str, date, date]]:
    h = provider.built_in_holiday(reference)
    if h is None or h.is_workday:
        return None

    start = _scan(provider, reference, h.name, -1, scan_limit)
    end = _scan(provider, reference, h.name, +1, scan_limit)
    if start is None or end is None:
        logger.warning(
            "built-in holiday %r around %s exceeds %d days per direction; ignoring",
            h.name, reference.isoformat(), scan_limit,
        )
        return None
    return h.name, start, end


def holiday_progress(
    reference: date,
    ranges: Sequence[CustomHolidayRange],
    provider: Provider,
    *,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
) -> Optional[HolidayProgress]:
    custom = find_range(date_key(reference), ranges)
    if custom is not None:
        return _progress(custom.name, reference, custom.start_date, custom.end_date, "custom")

    span = builtin_span(provider, reference, scan_limit=scan_limit)
    if span is None:
        return None
    name, start, end = span
    return _progress(name, reference, start, end, "builtin")
