from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from lines.core.grid import Color


@dataclass(slots=True)
class Selection:
    """Currently selected piece and the path preview shown while hovering."""

    cell: Optional[Tuple[int, int]] = None
    path: List[Tuple[int, int]] = field(default_factory=list)
    path_color: Optional[Color] = None

    def clear_path(self) -> None:
        self.path = []
        self.path_color = None

    def clear(self) -> None:
        self.cell = None
        self.clear_path()
