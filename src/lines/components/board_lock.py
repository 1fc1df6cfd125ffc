from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(slots=True)
class BoardLock:
    """Input lock held between an accepted move and the turn resolution.

    remaining counts down in seconds on every tick while locked.
    """

    locked: bool = False
    remaining: float = 0.0
    last_move: Optional[Tuple[Tuple[int, int], Tuple[int, int]]] = None
