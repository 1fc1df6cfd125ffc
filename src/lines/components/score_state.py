from dataclasses import dataclass

from lines.core.scoring import COMBO_BASE


@dataclass(slots=True)
class ScoreState:
    score: int = 0
    combo: float = COMBO_BASE
    destroyed_pieces: int = 0
