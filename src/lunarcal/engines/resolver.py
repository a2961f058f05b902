"""
lunarcal.engines.resolver
-------------------------
Immutable per-date facts (lunar label, festival, built-in holiday status),
memoized in a session-owned BaseDayCache.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from lunarcal.core.cache import BaseDayCache
from lunarcal.core.provider import Provider
from lunarcal.core.time import date_key
from lunarcal.core.types import BaseDayFacts

logger = logging.getLogger(__name__)

FIRST_LUNAR_DAY = "初一"


def lunar_day_label(day_label: str, month_label: str) -> str:
    """The first day of a lunar month is labelled with the month name instead."""
    if day_label == FIRST_LUNAR_DAY:
        return f"{month_label}月"
    return day_label


class BaseDayResolver:
    def __init__(self, provider: Provider, cache: Optional[BaseDayCache] = None):
        self.provider = provider
        self.cache = cache if cache is not None else BaseDayCache()

    def resolve(self, d: date, is_current_month: bool) -> BaseDayFacts:
        key = date_key(d)
        cache_key = (key, is_current_month)
        facts = self.cache.get(cache_key)
        if facts is not None:
            return facts

        logger.debug("base day cache miss for %s (current_month=%s)", key, is_current_month)
        facts = self._compute(d, key, is_current_month)
        self.cache.put(cache_key, facts)
        return facts

    def _compute(self, d: date, key: str, is_current_month: bool) -> BaseDayFacts:
        # ProviderLookupError propagates: a wrong label is worse than none.
        lunar = self.provider.lunar_info(d)
        solar_festivals = self.provider.solar_festivals(d)
        holiday = self.provider.built_in_holiday(d)

        # Priority: lunar festival > solar festival > solar term.
        if lunar.festivals:
            festival = lunar.festivals[0]
        elif solar_festivals:
            festival = solar_festivals[0]
        else:
            festival = lunar.solar_term or ""

        return BaseDayFacts(
            date=d,
            key=key,
            is_current_month=is_current_month,
            lunar_day=lunar_day_label(lunar.day_label, lunar.month_label),
            festival=festival,
            builtin_is_holiday=holiday is not None and not holiday.is_workday,
            builtin_is_work=holiday is not None and holiday.is_workday,
            builtin_holiday_name=holiday.name if holiday is not None else "",
        )
