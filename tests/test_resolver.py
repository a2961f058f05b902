# tests/test_resolver.py

import pytest
from datetime import date

from lunarcal.core.cache import BaseDayCache
from lunarcal.core.errors import ProviderLookupError
from lunarcal.core.types import BuiltInHoliday, LunarInfo
from lunarcal.engines.resolver import BaseDayResolver, lunar_day_label

from conftest import FakeProvider


def test_resolve_is_memoized(provider):
    resolver = BaseDayResolver(provider)
    d = date(2026, 2, 17)

    first = resolver.resolve(d, True)
    second = resolver.resolve(d, True)

    assert first is second
    assert provider.lunar_calls == 1
    assert resolver.cache.hits == 1


def test_current_month_flag_is_part_of_the_key(provider):
    resolver = BaseDayResolver(provider)
    d = date(2026, 3, 1)

    inside = resolver.resolve(d, True)
    outside = resolver.resolve(d, False)

    assert inside.is_current_month and not outside.is_current_month
    assert (inside.lunar_day, inside.festival) == (outside.lunar_day, outside.festival)
    assert len(resolver.cache) == 2


def test_shared_cache_survives_new_resolver(provider):
    cache = BaseDayCache()
    facts = BaseDayResolver(provider, cache).resolve(date(2026, 1, 1), True)
    assert BaseDayResolver(provider, cache).resolve(date(2026, 1, 1), True) is facts
    assert provider.lunar_calls == 1


def test_first_lunar_day_uses_month_name():
    assert lunar_day_label("初一", "正") == "正月"
    assert lunar_day_label("初一", "闰二") == "闰二月"
    assert lunar_day_label("十五", "八") == "十五"


@pytest.mark.parametrize(
    "lunar_fest, solar_fest, term, expected",
    [
        (("春节",), ("情人节",), "立春", "春节"),
        ((), ("情人节", "其他"), "立春", "情人节"),
        ((), (), "立春", "立春"),
        ((), (), None, ""),
    ],
)
def test_festival_priority(lunar_fest, solar_fest, term, expected):
    key = "2026-02-14"
    prov = FakeProvider(
        lunar={key: LunarInfo(day_label="廿七", month_label="腊", festivals=lunar_fest, solar_term=term)},
        solar={key: solar_fest},
    )
    facts = BaseDayResolver(prov).resolve(date(2026, 2, 14), True)
    assert facts.festival == expected
    assert facts.display_label == (expected or "廿七")


def test_builtin_status():
    prov = FakeProvider(holidays={
        "2026-02-17": BuiltInHoliday("春节", is_workday=False),
        "2026-02-14": BuiltInHoliday("春节", is_workday=True),
    })
    r = BaseDayResolver(prov)

    holiday = r.resolve(date(2026, 2, 17), True)
    assert (holiday.builtin_is_holiday, holiday.builtin_is_work, holiday.builtin_holiday_name) == (True, False, "春节")

    work = r.resolve(date(2026, 2, 14), True)
    assert (work.builtin_is_holiday, work.builtin_is_work, work.builtin_holiday_name) == (False, True, "春节")

    plain = r.resolve(date(2026, 3, 3), True)
    assert (plain.builtin_is_holiday, plain.builtin_is_work, plain.builtin_holiday_name) == (False, False, "")


def test_provider_failure_propagates_and_is_not_cached():
    prov = FakeProvider(missing={"2026-02-01"})
    r = BaseDayResolver(prov)
    with pytest.raises(ProviderLookupError):
        r.resolve(date(2026, 2, 1), True)
    assert len(r.cache) == 0
