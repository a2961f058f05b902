# tests/test_lunar_provider.py
# Checks against the lunar_python tables (2024 official schedule).

from datetime import date

import lunarcal
from lunarcal.engines.lunar import LunarProvider


def test_spring_festival_2024():
    facts = lunarcal.day_facts(date(2024, 2, 10))

    assert facts.lunar_day == "正月"
    assert facts.festival == "春节"
    assert facts.builtin_is_holiday and not facts.builtin_is_work
    assert facts.builtin_holiday_name == "春节"


def test_ordinary_lunar_day_label():
    assert lunarcal.day_facts(date(2024, 2, 11)).lunar_day == "初二"


def test_compensatory_workday():
    facts = lunarcal.day_facts(date(2024, 2, 4))
    assert facts.builtin_is_work and not facts.builtin_is_holiday
    assert facts.builtin_holiday_name == "春节"


def test_solar_festival_and_term():
    assert lunarcal.day_facts(date(2024, 10, 1)).festival == "国庆节"
    assert lunarcal.day_facts(date(2024, 3, 20)).festival == "春分"


def test_provider_records():
    prov = LunarProvider()
    info = prov.lunar_info(date(2024, 2, 10))
    assert info.day_label == "初一"
    assert info.month_label == "正"
    assert "春节" in info.festivals
    assert prov.built_in_holiday(date(2024, 3, 5)) is None


def test_builtin_progress_2024_spring_festival():
    p = lunarcal.holiday_progress(date(2024, 2, 12))
    assert (p.name, p.day_index, p.remaining) == ("春节", 3, 5)
    assert (p.start, p.end) == (date(2024, 2, 10), date(2024, 2, 17))


def test_holiday_spans_2024():
    spans = {s.name: s for s in lunarcal.holiday_spans(2024)}
    spring = spans["春节"]
    assert (spring.start, spring.end, spring.days) == (date(2024, 2, 10), date(2024, 2, 17), 8)
    assert date(2024, 2, 4) in spring.workdays


def test_registry_defaults():
    assert "lunar" in lunarcal.list_providers()
    assert isinstance(lunarcal.get_provider(), LunarProvider)
