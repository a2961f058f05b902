# tests/test_merge.py

from datetime import date

from lunarcal.core.types import BaseDayFacts, CustomHolidayRange
from lunarcal.engines.merge import find_range, merge_day


def base(key="2026-02-14", *, holiday=False, work=False, name=""):
    return BaseDayFacts(
        date=date.fromisoformat(key),
        key=key,
        is_current_month=True,
        lunar_day="廿七",
        festival="情人节",
        builtin_is_holiday=holiday,
        builtin_is_work=work,
        builtin_holiday_name=name,
    )


def test_custom_range_overrides_builtin_workday():
    b = base(work=True, name="春节")
    ranges = [CustomHolidayRange("1", "年假", "2026-02-13", "2026-02-15")]

    rec = merge_day(b, ranges, set())

    assert rec.is_holiday is True
    assert rec.is_work is False
    assert rec.holiday_name == "年假"
    # built-in facts are still visible on the record
    assert rec.builtin_is_work is True and rec.builtin_holiday_name == "春节"


def test_builtin_passes_through_without_match():
    b = base(holiday=True, name="春节")
    ranges = [CustomHolidayRange("1", "年假", "2026-03-01", "2026-03-05")]

    rec = merge_day(b, ranges, set())

    assert (rec.is_holiday, rec.is_work, rec.holiday_name) == (True, False, "春节")


def test_overlapping_ranges_first_inserted_wins():
    first = CustomHolidayRange("1", "旅行", "2026-02-10", "2026-02-20")
    second = CustomHolidayRange("2", "年假", "2026-02-14", "2026-02-14")

    assert merge_day(base(), [first, second], set()).holiday_name == "旅行"
    assert merge_day(base(), [second, first], set()).holiday_name == "年假"
    assert find_range("2026-02-21", [first, second]) is None


def test_range_bounds_are_inclusive():
    r = CustomHolidayRange("1", "年假", "2026-02-14", "2026-02-16")
    assert r.contains("2026-02-14") and r.contains("2026-02-16")
    assert not r.contains("2026-02-13") and not r.contains("2026-02-17")
    assert r.total_days == 3


def test_marked_and_idempotent():
    b = base()
    ranges = [CustomHolidayRange("1", "年假", "2026-02-14", "2026-02-14")]
    marked = {"2026-02-14"}

    a = merge_day(b, ranges, marked)
    assert a.is_marked
    assert merge_day(b, ranges, marked) == a
    assert not merge_day(b, ranges, set()).is_marked
