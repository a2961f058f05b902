"""Diagnostics package.

- pretty_month, holiday_table: always available, text output
- holiday_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["pretty_month", "holiday_table", "holiday_scatter"]
