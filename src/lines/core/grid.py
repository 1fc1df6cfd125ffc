from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Sequence, Tuple

Coord = Tuple[int, int]


class Color(Enum):
    """Cell contents. EMPTY is a placeholder, never a matchable color."""

    EMPTY = "empty"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    WHITE = "white"


PALETTE: List[Color] = [color for color in Color if color is not Color.EMPTY]


class InvalidCoordinate(IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) is outside a {width}x{height} grid")
        self.x = x
        self.y = y


def manhattan_distance(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Grid:
    """Flat rectangular board of colors addressed by (x, y).

    Cells are stored row-major: index = y * width + x.
    """

    def __init__(self, width: int, height: int, fill: Color = Color.EMPTY):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[Color] = [fill] * (width * height)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Color | None]]) -> "Grid":
        """Build a grid from a list of rows (top row first); None means EMPTY."""
        if not rows or not rows[0]:
            raise ValueError("Grid rows must not be empty")
        width = len(rows[0])
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {width}")
            for x, color in enumerate(row):
                grid._cells[y * width + x] = color if color is not None else Color.EMPTY
        return grid

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self._cells) == (other.width, other.height, other._cells)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(x, y, self.width, self.height)
        return y * self.width + x

    def coords_of(self, index: int) -> Coord:
        if not 0 <= index < len(self._cells):
            raise InvalidCoordinate(index % self.width, index // self.width, self.width, self.height)
        return index % self.width, index // self.width

    def color_at(self, x: int, y: int) -> Color:
        return self._cells[self.index_of(x, y)]

    def set_color(self, x: int, y: int, color: Color) -> None:
        self._cells[self.index_of(x, y)] = color

    def is_empty(self, x: int, y: int) -> bool:
        return self.color_at(x, y) is Color.EMPTY

    def neighbors4(self, x: int, y: int) -> List[Coord]:
        """In-bounds cells one step up, down, left or right of (x, y)."""
        self.index_of(x, y)
        candidates = ((x, y - 1), (x + 1, y), (x, y + 1), (x - 1, y))
        return [(cx, cy) for cx, cy in candidates if self.in_bounds(cx, cy)]

    def is_surrounded(self, x: int, y: int) -> bool:
        return all(not self.is_empty(nx, ny) for nx, ny in self.neighbors4(x, y))

    def coords(self) -> Iterator[Coord]:
        for index in range(len(self._cells)):
            yield index % self.width, index // self.width

    def empty_cells(self) -> List[Coord]:
        return [coord for coord in self.coords() if self._cells[coord[1] * self.width + coord[0]] is Color.EMPTY]

    def occupied_cells(self) -> List[Coord]:
        return [coord for coord in self.coords() if self._cells[coord[1] * self.width + coord[0]] is not Color.EMPTY]

    def clear(self, cells: Iterable[Coord] | None = None) -> None:
        """Reset the given cells (or every cell) to EMPTY."""
        if cells is None:
            self._cells = [Color.EMPTY] * len(self._cells)
            return
        for x, y in cells:
            self.set_color(x, y, Color.EMPTY)

    def copy(self) -> "Grid":
        clone = Grid(self.width, self.height)
        clone._cells = list(self._cells)
        return clone

    def rows(self) -> List[List[Color]]:
        return [self._cells[y * self.width:(y + 1) * self.width] for y in range(self.height)]
