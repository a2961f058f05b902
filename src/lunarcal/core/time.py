from __future__ import annotations
import calendar as pycal
import re
from datetime import date, timedelta

_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def date_key(d: date) -> str:
    """Canonical zero-padded YYYY-MM-DD key; lexicographic order is chronological."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"

def parse_date_key(s: str) -> date:
    """Inverse of date_key. Rejects anything that is not zero-padded ISO."""
    if not _KEY_RE.match(s):
        raise ValueError(f"Expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)

def sunday_based_weekday(d: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return d.isoweekday() % 7

def to_monday_first_offset(weekday: int) -> int:
    """
    Map a Sunday-based weekday index (0=Sunday .. 6=Saturday) to its column
    in a Monday-first week (0=Monday .. 6=Sunday).

    This is the only place the two numberings are reconciled.
    """
    if not 0 <= weekday <= 6:
        raise ValueError(f"weekday must be in 0..6, got {weekday}")
    return 6 if weekday == 0 else weekday - 1

def first_of_month(d: date) -> date:
    return d.replace(day=1)

def last_of_month(d: date) -> date:
    return d.replace(day=pycal.monthrange(d.year, d.month)[1])

def add_months(d: date, n: int) -> date:
    """Shift a first-of-month date by n months (day is clamped to the month length)."""
    idx = d.year * 12 + (d.month - 1) + n
    y, m = divmod(idx, 12)
    day = min(d.day, pycal.monthrange(y, m + 1)[1])
    return date(y, m + 1, day)

def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)

def days_between(start: date, end: date) -> int:
    """Signed whole days from start to end."""
    return (end - start).days
