class LunarCalError(Exception):
    """Base error."""

class ProviderLookupError(LunarCalError):
    """Raised when the lunar/holiday provider cannot resolve a date."""

class UnknownProviderError(LunarCalError, KeyError):
    """Raised when a provider name is not registered."""

class InvalidRangeError(LunarCalError, ValueError):
    """Raised when a custom holiday range fails validation."""
