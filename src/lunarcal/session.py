"""
Calendar session state: the visible month window, selection, marked dates
and custom holiday ranges, plus the resolver cache that serves them.

All derived values (grids, block edges, progress) are recomputed on request
from the current state; nothing is patched incrementally.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, List, Optional, Tuple

from .core.cache import BaseDayCache
from .core.config import DEFAULT_CONFIG, SessionConfig
from .core.errors import InvalidRangeError
from .core.provider import Provider
from .core.time import add_months, date_key, days_between, first_of_month, parse_date_key
from .core.types import BaseDayFacts, BlockEdges, CustomHolidayRange, HolidayProgress, MonthGrid
from .engines.blocks import block_edges
from .engines.month import build_month
from .engines.progress import holiday_progress
from .engines.resolver import BaseDayResolver

logger = logging.getLogger(__name__)


def make_custom_range(id: str, name: str, start: str, end: str) -> CustomHolidayRange:
    """Validated constructor; raises InvalidRangeError."""
    if not (name or "").strip():
        raise InvalidRangeError("holiday name is required")
    if not start or not end:
        raise InvalidRangeError("start and end dates are required")
    try:
        parse_date_key(start)
        parse_date_key(end)
    except (TypeError, ValueError) as exc:
        raise InvalidRangeError(str(exc)) from exc
    if end < start:
        raise InvalidRangeError(f"end {end} is before start {start}")
    return CustomHolidayRange(id=id, name=name, start=start, end=end)


def describe_distance(days: int) -> str:
    if days > 0:
        return f"还有 {days} 天"
    if days < 0:
        return f"已过 {-days} 天"
    return "就是今天"


def month_title(d: date) -> str:
    return f"{d.year}年 {d.month}月"


@dataclass(frozen=True)
class MonthView:
    grid: MonthGrid
    edges: Tuple[BlockEdges, ...]
    today_index: Optional[int]
    selected_index: Optional[int]

    @property
    def title(self) -> str:
        return f"{self.grid.month.month}月"


@dataclass(frozen=True)
class SelectedDay:
    facts: BaseDayFacts
    is_marked: bool
    days_from_today: int

    @property
    def distance_label(self) -> str:
        return describe_distance(self.days_from_today)


class CalendarSession:
    def __init__(
        self,
        provider: Provider,
        today: Optional[date] = None,
        config: SessionConfig = DEFAULT_CONFIG,
    ):
        self.provider = provider
        self.config = config
        self.today = today if today is not None else date.today()
        self.cache = BaseDayCache()
        self.resolver = BaseDayResolver(provider, self.cache)

        self.marked: set[str] = set()
        self.custom_holidays: List[CustomHolidayRange] = []
        self.selected: Optional[date] = None
        self.active_month = first_of_month(self.today)
        self.months: List[date] = self._window(self.active_month)

    # ---------------------------------------------------------
    # Month window
    # ---------------------------------------------------------

    def _window(self, anchor: date) -> List[date]:
        anchor = first_of_month(anchor)
        r = self.config.window_radius
        return [add_months(anchor, i) for i in range(-r, r + 1)]

    def jump_to_month(self, d: date) -> None:
        self.active_month = first_of_month(d)
        self.months = self._window(self.active_month)
        logger.debug("window re-anchored at %s (%d months)", self.active_month, len(self.months))

    def go_to_today(self) -> None:
        self.jump_to_month(self.today)
        self.select(self.today)

    def set_active_month(self, d: date) -> None:
        self.active_month = first_of_month(d)

    @property
    def title(self) -> str:
        return month_title(self.active_month)

    # ---------------------------------------------------------
    # Selection and marks
    # ---------------------------------------------------------

    def select(self, d: date) -> None:
        self.selected = d

    def clear_selection(self) -> None:
        self.selected = None

    def is_marked(self, d: date) -> bool:
        return date_key(d) in self.marked

    def toggle_mark(self, d: date) -> bool:
        """Flip the mark on `d`; returns the new state."""
        key = date_key(d)
        if key in self.marked:
            self.marked.discard(key)
            return False
        self.marked.add(key)
        return True

    def selected_details(self) -> Optional[SelectedDay]:
        if self.selected is None:
            return None
        return SelectedDay(
            facts=self.resolver.resolve(self.selected, True),
            is_marked=self.is_marked(self.selected),
            days_from_today=days_between(self.today, self.selected),
        )

    # ---------------------------------------------------------
    # Custom holidays
    # ---------------------------------------------------------

    def add_custom_holiday(
        self,
        name: str,
        end: str,
        start: Optional[str] = None,
    ) -> Optional[CustomHolidayRange]:
        """
        Append a custom holiday range starting at `start` (default: the selected
        date). Invalid input is rejected without raising: returns None and
        leaves the session unchanged.
        """
        if start is None:
            if self.selected is None:
                logger.info("custom holiday rejected: no start date selected")
                return None
            start = date_key(self.selected)
        try:
            rng = make_custom_range(str(len(self.custom_holidays) + 1), name, start, end)
        except InvalidRangeError as exc:
            logger.info("custom holiday rejected: %s", exc)
            return None
        self.custom_holidays.append(rng)
        return rng

    # ---------------------------------------------------------
    # Derived views
    # ---------------------------------------------------------

    def marked_keys(self) -> FrozenSet[str]:
        return frozenset(self.marked)

    def month_grid(self, month: date) -> MonthGrid:
        return build_month(
            month,
            self.resolver,
            tuple(self.custom_holidays),
            self.marked_keys(),
            cells=self.config.grid_cells,
        )

    def month_view(self, month: date) -> MonthView:
        grid = self.month_grid(month)
        return MonthView(
            grid=grid,
            edges=block_edges(grid),
            today_index=grid.index_of(self.today),
            selected_index=grid.index_of(self.selected) if self.selected is not None else None,
        )

    def visible_grids(self) -> List[MonthGrid]:
        return [self.month_grid(m) for m in self.months]

    def progress(self, reference: Optional[date] = None) -> Optional[HolidayProgress]:
        return holiday_progress(
            reference if reference is not None else self.today,
            tuple(self.custom_holidays),
            self.provider,
            scan_limit=self.config.progress_scan_limit,
        )

    def close(self) -> None:
        self.cache.clear()
