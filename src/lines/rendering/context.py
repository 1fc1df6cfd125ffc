from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from esper import World

from lines.ui.layout import cell_center

BoardPos = Tuple[int, int]


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    window_width: int
    window_height: int
    cols: int
    rows: int
    tile_size: int
    board_left: float
    board_bottom: float
    cell_centers: Dict[BoardPos, Tuple[float, float]] = field(default_factory=dict)

    @property
    def board_width(self) -> float:
        return self.cols * self.tile_size

    @property
    def board_height(self) -> float:
        return self.rows * self.tile_size

    @property
    def board_top(self) -> float:
        return self.board_bottom + self.board_height

    @property
    def board_right(self) -> float:
        return self.board_left + self.board_width


def build_render_context(
    *,
    world: World,
    window_width: int,
    window_height: int,
    cols: int,
    rows: int,
    tile_size: int,
    board_left: float,
    board_bottom: float,
) -> RenderContext:
    centers = {
        (x, y): cell_center(x, y, rows, tile_size, board_left, board_bottom)
        for y in range(rows)
        for x in range(cols)
    }
    return RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        cols=cols,
        rows=rows,
        tile_size=tile_size,
        board_left=board_left,
        board_bottom=board_bottom,
        cell_centers=centers,
    )
