from datetime import date, timedelta

import pytest

import lunarcal
from lunarcal.core.errors import ProviderLookupError
from lunarcal.core.types import BuiltInHoliday, LunarInfo


class FakeProvider:
    """In-memory provider: every date is an ordinary day unless a table says otherwise."""

    def __init__(self, holidays=None, lunar=None, solar=None, missing=()):
        self.holidays = dict(holidays or {})
        self.lunar = dict(lunar or {})
        self.solar = dict(solar or {})
        self.missing = set(missing)
        self.lunar_calls = 0

    def lunar_info(self, d):
        self.lunar_calls += 1
        if d.isoformat() in self.missing:
            raise ProviderLookupError(f"no table for {d.isoformat()}")
        return self.lunar.get(d.isoformat(), LunarInfo(day_label="初二", month_label="正"))

    def solar_festivals(self, d):
        return tuple(self.solar.get(d.isoformat(), ()))

    def built_in_holiday(self, d):
        return self.holidays.get(d.isoformat())


def holiday_run(name, start, days, *, workdays=()):
    """Table of `days` consecutive holidays named `name` from `start`, plus workdays."""
    table = {
        (start + timedelta(days=i)).isoformat(): BuiltInHoliday(name=name, is_workday=False)
        for i in range(days)
    }
    for w in workdays:
        table[w.isoformat()] = BuiltInHoliday(name=name, is_workday=True)
    return table


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def session(provider):
    return lunarcal.CalendarSession(provider, today=date(2026, 2, 22))


@pytest.fixture
def fake_registered():
    """Registers a FakeProvider under the name 'fake' for API/CLI tests."""
    prov = FakeProvider(holidays=holiday_run("国庆节", date(2025, 10, 1), 8, workdays=[date(2025, 9, 28)]))
    lunarcal.register_provider("fake", prov, overwrite=True)
    return prov
