from dataclasses import dataclass

from lines.constants import (
    COMBO_GROWTH,
    GRID_HEIGHT,
    GRID_WIDTH,
    LOCK_DURATION,
    MIN_RUN_LENGTH,
    SPAWN_COUNT,
)


@dataclass(slots=True)
class SessionConfig:
    """Per-game tuning stored on the singleton state entity."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    min_run_length: int = MIN_RUN_LENGTH
    spawn_count: int = SPAWN_COUNT
    combo_growth: float = COMBO_GROWTH
    lock_duration: float = LOCK_DURATION

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        if self.min_run_length < 1:
            raise ValueError(f"Minimum run length must be at least 1, got {self.min_run_length}")
        if self.spawn_count < 1:
            raise ValueError(f"Spawn count must be at least 1, got {self.spawn_count}")
