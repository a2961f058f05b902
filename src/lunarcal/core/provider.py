from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Protocol, Tuple

from .errors import UnknownProviderError
from .types import BuiltInHoliday, LunarInfo

class Provider(Protocol):
    def lunar_info(self, d: date) -> LunarInfo: ...
    def solar_festivals(self, d: date) -> Tuple[str, ...]: ...
    def built_in_holiday(self, d: date) -> Optional[BuiltInHoliday]: ...

@dataclass
class ProviderRegistry:
    _providers: Dict[str, Provider]

    def get(self, name: str) -> Provider:
        if name not in self._providers:
            raise UnknownProviderError(f"Unknown provider '{name}'. Available: {sorted(self._providers)}")
        return self._providers[name]

    def list(self) -> List[str]:
        return sorted(self._providers.keys())

    def register(self, name: str, provider: Provider, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._providers):
            raise KeyError(f"Provider '{name}' already exists. Use overwrite=True to replace.")
        self._providers[name] = provider
