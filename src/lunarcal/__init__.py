"""lunarcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_providers,
    get_provider,
    register_provider,
    make_session,
    day_facts,
    month_grid,
    holiday_progress,
    holiday_spans,
)
from .core.config import SessionConfig
from .core.errors import InvalidRangeError, LunarCalError, ProviderLookupError, UnknownProviderError
from .core.types import (
    BaseDayFacts,
    BlockEdges,
    BuiltInHoliday,
    CustomHolidayRange,
    DayRecord,
    HolidayProgress,
    HolidaySpan,
    LunarInfo,
    MonthGrid,
)
from .session import CalendarSession, make_custom_range

__all__ = [
    "list_providers",
    "get_provider",
    "register_provider",
    "make_session",
    "day_facts",
    "month_grid",
    "holiday_progress",
    "holiday_spans",
    "SessionConfig",
    "LunarCalError",
    "ProviderLookupError",
    "UnknownProviderError",
    "InvalidRangeError",
    "BaseDayFacts",
    "BlockEdges",
    "BuiltInHoliday",
    "CustomHolidayRange",
    "DayRecord",
    "HolidayProgress",
    "HolidaySpan",
    "LunarInfo",
    "MonthGrid",
    "CalendarSession",
    "make_custom_range",
]
