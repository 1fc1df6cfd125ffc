"""A* search over the 4-connected board.

Pieces may only travel through EMPTY cells. Every call builds a fresh node
arena from the current grid, so the search never mutates the board.
"""
from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from lines.core.grid import Color, Coord, Grid, manhattan_distance


class NodeState(Enum):
    OPEN = "O"
    DISCOVERED = "D"
    CLOSED = "C"
    WALL = "X"
    START = "S"
    END = "E"


@dataclass(slots=True)
class PathNode:
    """Per-search annotation of one grid cell; parent is an arena index."""

    x: int
    y: int
    state: NodeState
    g: int = 0
    h: int = 0
    parent: Optional[int] = None

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def coord(self) -> Coord:
        return self.x, self.y


# Heap entries order by f, then h, then discovery sequence.
_HeapEntry = Tuple[int, int, int, int]

_WALKABLE = (NodeState.OPEN, NodeState.DISCOVERED, NodeState.END)


def build_nodes(grid: Grid, start: Coord, end: Coord) -> List[PathNode]:
    """Return the node arena for one search, indexed like the grid."""
    nodes: List[PathNode] = []
    for x, y in grid.coords():
        state = NodeState.OPEN if grid.color_at(x, y) is Color.EMPTY else NodeState.WALL
        nodes.append(PathNode(x=x, y=y, state=state))
    start_node = nodes[grid.index_of(*start)]
    if start_node.state is not NodeState.WALL:
        start_node.state = NodeState.START
    end_node = nodes[grid.index_of(*end)]
    if end_node.state is not NodeState.WALL:
        end_node.state = NodeState.END
    return nodes


def find_path(grid: Grid, start: Coord, end: Coord) -> Optional[List[Coord]]:
    """Shortest route from start to end through empty cells, both ends included.

    The start cell is expanded whatever it holds (normally the moving piece);
    an occupied end cell is a wall, so the result is None. None is also
    returned when the end is walled off.
    """
    start = (int(start[0]), int(start[1]))
    end = (int(end[0]), int(end[1]))
    if start == end:
        raise ValueError(f"Path start and end are the same cell {start}")
    nodes = build_nodes(grid, start, end)
    start_index = grid.index_of(*start)
    nodes[start_index].h = manhattan_distance(start, end)

    open_heap: List[_HeapEntry] = []
    sequence = itertools.count()
    current = start_index
    while True:
        current_node = nodes[current]
        for nx, ny in grid.neighbors4(current_node.x, current_node.y):
            index = ny * grid.width + nx
            node = nodes[index]
            if node.state not in _WALKABLE:
                continue
            g = current_node.g + 1
            if node.state is NodeState.END:
                node.g = g
                node.parent = current
                return _reconstruct(nodes, index)
            if node.state is NodeState.OPEN:
                node.state = NodeState.DISCOVERED
                node.h = manhattan_distance((nx, ny), end)
            elif g >= node.g:
                continue
            node.g = g
            node.parent = current
            heapq.heappush(open_heap, (node.f, node.h, next(sequence), index))
        if current_node.state is NodeState.DISCOVERED:
            current_node.state = NodeState.CLOSED
        current = _pop_open(nodes, open_heap)
        if current is None:
            return None


def _pop_open(nodes: List[PathNode], open_heap: List[_HeapEntry]) -> Optional[int]:
    while open_heap:
        f, _, _, index = heapq.heappop(open_heap)
        node = nodes[index]
        # Entries left behind by a re-parented node carry a stale f.
        if node.state is NodeState.DISCOVERED and node.f == f:
            return index
    return None


def _reconstruct(nodes: List[PathNode], end_index: int) -> List[Coord]:
    path: List[Coord] = []
    index: Optional[int] = end_index
    while index is not None:
        node = nodes[index]
        path.append(node.coord)
        index = node.parent
    path.reverse()
    return path
