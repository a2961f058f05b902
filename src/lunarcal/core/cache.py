from __future__ import annotations
from typing import Dict, Optional, Tuple

from .types import BaseDayFacts

CacheKey = Tuple[str, bool]  # (YYYY-MM-DD, is_current_month)


class BaseDayCache:
    """
    Grow-only memo table for BaseDayFacts.

    Owned by a calendar session; entries are never evicted or invalidated
    because date facts do not change. Only clear() empties it.
    """

    def __init__(self) -> None:
        self._entries: Dict[CacheKey, BaseDayFacts] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: CacheKey) -> Optional[BaseDayFacts]:
        facts = self._entries.get(key)
        if facts is None:
            self.misses += 1
        else:
            self.hits += 1
        return facts

    def put(self, key: CacheKey, facts: BaseDayFacts) -> None:
        self._entries[key] = facts

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries
