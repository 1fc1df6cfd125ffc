"""Detection of same-colored runs along rows, columns and both diagonals."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from lines.core.grid import Color, Coord, Grid


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal_down"
    DIAGONAL_UP = "diagonal_up"


@dataclass(slots=True)
class DirectionResult:
    """Cells of every accepted run found along one direction."""

    direction: Direction
    cells: List[Coord] = field(default_factory=list)

    @property
    def status(self) -> bool:
        return bool(self.cells)


@dataclass(slots=True)
class RunState:
    """Scan accumulator: the run being built and the runs accepted so far."""

    min_length: int
    color: Color = Color.EMPTY
    run: List[Coord] = field(default_factory=list)
    accepted: List[Coord] = field(default_factory=list)


def _flush(state: RunState) -> None:
    if state.run and len(state.run) >= state.min_length:
        state.accepted.extend(state.run)
    state.color = Color.EMPTY
    state.run = []


def _feed(state: RunState, coord: Coord, color: Color) -> None:
    if color is Color.EMPTY:
        _flush(state)
    elif color is state.color:
        state.run.append(coord)
    else:
        _flush(state)
        state.color = color
        state.run = [coord]


def _walk(grid: Grid, x: int, y: int, dx: int, dy: int) -> Iterator[Coord]:
    while grid.in_bounds(x, y):
        yield x, y
        x += dx
        y += dy


def scan_lines(grid: Grid, direction: Direction) -> Iterator[List[Coord]]:
    """Yield the scan lines of one direction, each as an ordered cell list."""
    width, height = grid.width, grid.height
    if direction is Direction.HORIZONTAL:
        for y in range(height):
            yield list(_walk(grid, 0, y, 1, 0))
    elif direction is Direction.VERTICAL:
        for x in range(width):
            yield list(_walk(grid, x, 0, 0, 1))
    elif direction is Direction.DIAGONAL_DOWN:
        for y in range(height - 1, -1, -1):
            yield list(_walk(grid, 0, y, 1, 1))
        for x in range(1, width):
            yield list(_walk(grid, x, 0, 1, 1))
    elif direction is Direction.DIAGONAL_UP:
        for y in range(height):
            yield list(_walk(grid, 0, y, 1, -1))
        for x in range(1, width):
            yield list(_walk(grid, x, height - 1, 1, -1))
    else:
        raise ValueError(f"Unknown direction {direction!r}")


def scan_direction(grid: Grid, direction: Direction, n: int) -> DirectionResult:
    state = RunState(min_length=n)
    for line in scan_lines(grid, direction):
        for x, y in line:
            _feed(state, (x, y), grid.color_at(x, y))
        _flush(state)
    return DirectionResult(direction=direction, cells=state.accepted)


def scan_runs(grid: Grid, n: int) -> Optional[List[DirectionResult]]:
    """Return one result per direction, or None when no run of length >= n exists.

    Results keep the fixed direction order and include directions without
    runs. A cell shared by runs in several directions is listed in each.
    """
    results = [scan_direction(grid, direction, n) for direction in Direction]
    if not any(result.status for result in results):
        return None
    return results


def matched_cells(results: Iterable[DirectionResult]) -> List[Coord]:
    """Distinct cells across all directions, in first-seen order."""
    seen: set[Coord] = set()
    ordered: List[Coord] = []
    for result in results:
        for cell in result.cells:
            if cell not in seen:
                seen.add(cell)
                ordered.append(cell)
    return ordered
