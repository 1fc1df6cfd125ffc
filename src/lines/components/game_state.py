"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    """High-level game modes that gate input handling."""
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the session mode and its timeline."""
    mode: GameMode = GameMode.PLAYING
    started_at: Optional[float] = None
    ended_at: Optional[float] = None
    turns: int = 0

    @property
    def elapsed(self) -> float:
        if self.started_at is None:
            return 0.0
        end = self.ended_at if self.ended_at is not None else self.started_at
        return max(0.0, end - self.started_at)
