from __future__ import annotations
from dataclasses import dataclass, replace

@dataclass(frozen=True)
class SessionConfig:
    """Plain settings payload for a calendar session."""
    provider: str = "lunar"
    window_radius: int = 12       # months kept on each side of the anchor month
    grid_cells: int = 42          # 6 rows x 7 columns
    progress_scan_limit: int = 30 # days scanned per direction for a built-in holiday run

    def __post_init__(self) -> None:
        if self.window_radius < 0:
            raise ValueError("window_radius must be >= 0")
        if self.grid_cells != 42:
            raise ValueError("grid_cells must be 42")
        if self.progress_scan_limit < 1:
            raise ValueError("progress_scan_limit must be >= 1")

    def tweak(self, **kwargs) -> "SessionConfig":
        return replace(self, **kwargs)

DEFAULT_CONFIG = SessionConfig()
