from dataclasses import dataclass, field

from lines.core.grid import Grid


@dataclass(slots=True)
class Board:
    width: int
    height: int
    grid: Grid = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.grid = Grid(self.width, self.height)
