# tests/test_time.py

import pytest
from datetime import date, timedelta

from lunarcal.core.time import (
    add_months,
    date_key,
    days_between,
    last_of_month,
    parse_date_key,
    sunday_based_weekday,
    to_monday_first_offset,
)


def test_monday_first_offset_mapping():
    # 0=Sunday .. 6=Saturday in, 0=Monday .. 6=Sunday out
    assert [to_monday_first_offset(w) for w in range(7)] == [6, 0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("bad", [-1, 7, 10])
def test_monday_first_offset_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        to_monday_first_offset(bad)


def test_sunday_based_weekday_agrees_with_offset():
    d = date(2026, 1, 26)  # Monday
    for i in range(14):
        day = d + timedelta(days=i)
        assert to_monday_first_offset(sunday_based_weekday(day)) == day.weekday()


def test_date_key_is_zero_padded():
    assert date_key(date(2026, 2, 1)) == "2026-02-01"
    assert date_key(date(987, 3, 9)) == "0987-03-09"


def test_date_key_order_is_chronological():
    """Lexicographic order of keys must match date order."""
    start = date(2025, 12, 25)
    days = [start + timedelta(days=i) for i in range(60)]
    keys = [date_key(d) for d in days]
    assert keys == sorted(keys)
    assert [parse_date_key(k) for k in keys] == days


@pytest.mark.parametrize("bad", ["2026-2-1", "2026/02/01", "20260201", ""])
def test_parse_date_key_rejects_non_iso(bad):
    with pytest.raises(ValueError):
        parse_date_key(bad)


def test_month_helpers():
    assert add_months(date(2026, 1, 1), -12) == date(2025, 1, 1)
    assert add_months(date(2026, 11, 1), 3) == date(2027, 2, 1)
    assert last_of_month(date(2024, 2, 5)) == date(2024, 2, 29)
    assert days_between(date(2026, 2, 20), date(2026, 2, 23)) == 3
    assert days_between(date(2026, 2, 23), date(2026, 2, 20)) == -3
