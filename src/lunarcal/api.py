from __future__ import annotations

from datetime import date
from typing import AbstractSet, Dict, Iterable, List, Optional, Sequence, Tuple

from .core.config import DEFAULT_CONFIG, SessionConfig
from .core.provider import Provider, ProviderRegistry
from .core.time import add_days
from .core.types import BaseDayFacts, CustomHolidayRange, HolidayProgress, HolidaySpan, MonthGrid
from .engines.month import build_month
from .engines.progress import DEFAULT_SCAN_LIMIT, holiday_progress as _holiday_progress
from .engines.resolver import BaseDayResolver
from .session import CalendarSession

_registry: Optional[ProviderRegistry] = None

def set_registry(reg: ProviderRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ProviderRegistry:
    if _registry is None:
        raise RuntimeError("Provider registry not initialized")
    return _registry

def list_providers() -> List[str]:
    return _reg().list()

def get_provider(name: str = "lunar") -> Provider:
    return _reg().get(name)

def register_provider(name: str, provider: Provider, *, overwrite: bool = False) -> None:
    _reg().register(name, provider, overwrite=overwrite)

def make_session(
    today: Optional[date] = None,
    *,
    config: SessionConfig = DEFAULT_CONFIG,
) -> CalendarSession:
    return CalendarSession(_reg().get(config.provider), today=today, config=config)

# ============================================================
# One-shot helpers (fresh resolver per call, no shared cache)
# ============================================================

def day_facts(d: date, *, provider: str = "lunar", is_current_month: bool = True) -> BaseDayFacts:
    return BaseDayResolver(_reg().get(provider)).resolve(d, is_current_month)

def month_grid(
    year: int,
    month: int,
    *,
    holidays: Sequence[CustomHolidayRange] = (),
    marked: AbstractSet[str] = frozenset(),
    provider: str = "lunar",
) -> MonthGrid:
    resolver = BaseDayResolver(_reg().get(provider))
    return build_month(date(year, month, 1), resolver, holidays, marked)

def holiday_progress(
    d: date,
    *,
    holidays: Sequence[CustomHolidayRange] = (),
    provider: str = "lunar",
    scan_limit: int = DEFAULT_SCAN_LIMIT,
) -> Optional[HolidayProgress]:
    return _holiday_progress(d, holidays, _reg().get(provider), scan_limit=scan_limit)

def _days(start: date, end: date) -> Iterable[date]:
    d = start
    while d <= end:
        yield d
        d = add_days(d, 1)

def holiday_spans(year: int, *, provider: str = "lunar") -> List[HolidaySpan]:
    """
    Built-in holiday runs within a Gregorian year, in date order, each with
    the compensatory workdays of that year carrying the same name.
    """
    prov = _reg().get(provider)
    runs: List[Tuple[str, date, date]] = []
    workdays: Dict[str, List[date]] = {}

    for d in _days(date(year, 1, 1), date(year, 12, 31)):
        h = prov.built_in_holiday(d)
        if h is None:
            continue
        if h.is_workday:
            workdays.setdefault(h.name, []).append(d)
            continue
        if runs and runs[-1][0] == h.name and add_days(runs[-1][2], 1) == d:
            runs[-1] = (h.name, runs[-1][1], d)
        else:
            runs.append((h.name, d, d))

    return [
        HolidaySpan(name=name, start=start, end=end, workdays=tuple(workdays.get(name, ())))
        for name, start, end in runs
    ]
