"""
lunarcal.engines.lunar
----------------------
Default lunar/holiday provider backed by the ``lunar_python`` tables
(Chinese lunisolar calendar, solar terms, and the official holiday
and compensatory-workday schedule).
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Tuple

from lunar_python import Solar
from lunar_python.util import HolidayUtil

from lunarcal.core.errors import ProviderLookupError
from lunarcal.core.types import BuiltInHoliday, LunarInfo


class LunarProvider:
    """Adapter from ``lunar_python`` objects to plain provider records."""

    name = "lunar"

    def _solar(self, d: date) -> Solar:
        try:
            return Solar.fromYmd(d.year, d.month, d.day)
        except Exception as exc:
            raise ProviderLookupError(f"lunar_python cannot resolve {d.isoformat()}") from exc

    def lunar_info(self, d: date) -> LunarInfo:
        solar = self._solar(d)
        try:
            lunar = solar.getLunar()
            jie_qi = lunar.getJieQi()
            return LunarInfo(
                day_label=lunar.getDayInChinese(),
                month_label=lunar.getMonthInChinese(),
                festivals=tuple(lunar.getFestivals()),
                solar_term=jie_qi or None,
            )
        except Exception as exc:
            raise ProviderLookupError(f"No lunar data for {d.isoformat()}") from exc

    def solar_festivals(self, d: date) -> Tuple[str, ...]:
        return tuple(self._solar(d).getFestivals())

    def built_in_holiday(self, d: date) -> Optional[BuiltInHoliday]:
        h = HolidayUtil.getHoliday(d.year, d.month, d.day)
        if h is None:
            return None
        return BuiltInHoliday(name=h.getName(), is_workday=bool(h.isWork()))
