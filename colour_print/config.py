"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a play session or CLI run."""

    # Levels
    min_level_id: int = 1
    max_level_count: int = 50000

    # Logging
    log_level: str = "WARNING"

    def is_playable(self, level_id: int) -> bool:
        return self.min_level_id <= level_id <= self.max_level_count
