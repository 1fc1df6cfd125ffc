from dataclasses import dataclass, field
from typing import List

from lines.core.grid import Color


@dataclass(slots=True)
class NextPieces:
    """Colors the next spawn will place, shown to the player in advance."""

    colors: List[Color] = field(default_factory=list)
