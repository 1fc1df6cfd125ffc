from __future__ import annotations

from typing import TYPE_CHECKING

from lines.core.grid import Color
from lines.rendering.colors import (
    CELL_BACKGROUND,
    CELL_OUTLINE,
    PIECE_COLORS,
    SELECTION_OUTLINE,
    tint,
)

if TYPE_CHECKING:
    from lines.components.selection import Selection
    from lines.core.grid import Grid
    from lines.rendering.context import RenderContext


class BoardRenderer:
    def __init__(self, padding: int = 4):
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, grid: Grid, selection: Selection, headless: bool) -> dict:
        """Draw cells, pieces, the path highlight and the selection ring.

        Returns the per-cell layout (centre, radius, colour) so headless callers can inspect it.
        """
        half = ctx.tile_size / 2
        radius = max(ctx.tile_size - self._padding * 2, 4) / 2
        layout: dict = {}
        path_cells = set(selection.path)
        path_rgb = PIECE_COLORS.get(selection.path_color) if selection.path_color else None
        for (x, y), (cx, cy) in ctx.cell_centers.items():
            color = grid.color_at(x, y)
            layout[(x, y)] = {"center": (cx, cy), "radius": radius, "color": color}
            if headless:
                continue
            arcade.draw_lrbt_rectangle_filled(cx - half, cx + half, cy - half, cy + half, CELL_BACKGROUND)
            if path_rgb is not None and (x, y) in path_cells:
                arcade.draw_lrbt_rectangle_filled(cx - half, cx + half, cy - half, cy + half, tint(path_rgb, 70))
            arcade.draw_lrbt_rectangle_outline(cx - half, cx + half, cy - half, cy + half, CELL_OUTLINE, 2)
            if color is not Color.EMPTY:
                arcade.draw_circle_filled(cx, cy, radius, PIECE_COLORS[color])
        if selection.cell is not None and not headless:
            cx, cy = ctx.cell_centers[selection.cell]
            arcade.draw_circle_outline(cx, cy, radius + 3, SELECTION_OUTLINE, 3)
        return layout
