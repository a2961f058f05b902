from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Iterator, Literal, Optional, Tuple

from .time import parse_date_key

@dataclass(frozen=True)
class LunarInfo:
    day_label: str
    month_label: str
    festivals: Tuple[str, ...] = ()
    solar_term: Optional[str] = None

@dataclass(frozen=True)
class BuiltInHoliday:
    name: str
    is_workday: bool

@dataclass(frozen=True)
class BaseDayFacts:
    """Date-only facts; never change for a given date."""
    date: date
    key: str
    is_current_month: bool
    lunar_day: str
    festival: str
    builtin_is_holiday: bool
    builtin_is_work: bool
    builtin_holiday_name: str

    @property
    def display_label(self) -> str:
        return self.festival or self.lunar_day

@dataclass(frozen=True)
class CustomHolidayRange:
    id: str
    name: str
    start: str  # YYYY-MM-DD, inclusive
    end: str    # YYYY-MM-DD, inclusive

    def contains(self, key: str) -> bool:
        return self.start <= key <= self.end

    @property
    def start_date(self) -> date:
        return parse_date_key(self.start)

    @property
    def end_date(self) -> date:
        return parse_date_key(self.end)

    @property
    def total_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

@dataclass(frozen=True)
class DayRecord:
    date: date
    key: str
    is_current_month: bool
    lunar_day: str
    festival: str
    builtin_is_holiday: bool
    builtin_is_work: bool
    builtin_holiday_name: str
    is_holiday: bool
    is_work: bool
    holiday_name: str
    is_marked: bool

    @property
    def display_label(self) -> str:
        return self.festival or self.lunar_day

    @property
    def is_weekend(self) -> bool:
        return self.date.weekday() >= 5

@dataclass(frozen=True)
class MonthGrid:
    month: date
    offset: int
    days: Tuple[DayRecord, ...]

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[DayRecord]:
        return iter(self.days)

    def __getitem__(self, i: int) -> DayRecord:
        return self.days[i]

    def weeks(self) -> Tuple[Tuple[DayRecord, ...], ...]:
        return tuple(self.days[i:i + 7] for i in range(0, len(self.days), 7))

    def index_of(self, d: date) -> Optional[int]:
        for i, rec in enumerate(self.days):
            if rec.date == d:
                return i
        return None

@dataclass(frozen=True)
class BlockEdges:
    holiday_start: bool = False
    holiday_end: bool = False
    block_start: bool = False
    block_end: bool = False
    show_name: bool = False

@dataclass(frozen=True)
class HolidayProgress:
    name: str
    day_index: int  # 1-based
    remaining: int
    start: date
    end: date
    source: Literal["custom", "builtin"]

    @property
    def total_days(self) -> int:
        return self.day_index + self.remaining

@dataclass(frozen=True)
class HolidaySpan:
    """A contiguous run of built-in non-workday holidays sharing one name."""
    name: str
    start: date
    end: date
    workdays: Tuple[date, ...] = ()  # compensatory workdays with the same name

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1
