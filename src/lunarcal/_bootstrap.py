from __future__ import annotations
from lunarcal.core.provider import ProviderRegistry
from lunarcal.engines.lunar import LunarProvider

def build_registry() -> ProviderRegistry:
    providers = {}
    for provider in (LunarProvider(),):
        providers[provider.name] = provider
    return ProviderRegistry(providers)
