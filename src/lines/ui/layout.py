from typing import Optional, Tuple

from lines.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    HUD_HEIGHT,
    MIN_TILE_SIZE,
)


def compute_board_geometry(window_width: int, window_height: int, cols: int, rows: int):
    """Return (tile_size, start_x, start_y) for a board centred horizontally above the bottom margin.

    Shared by RenderSystem and InputSystem so clicks land on the tile that is drawn.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HUD_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / cols, max_board_h / rows))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_center(x: int, y: int, rows: int, tile_size: int, start_x: float, start_y: float) -> Tuple[float, float]:
    """Screen centre of grid cell (x, y); grid row 0 is drawn at the top."""
    screen_row = rows - 1 - y
    return start_x + x * tile_size + tile_size / 2, start_y + screen_row * tile_size + tile_size / 2


def point_to_cell(
    px: float, py: float, cols: int, rows: int, tile_size: int, start_x: float, start_y: float
) -> Optional[Tuple[int, int]]:
    if px < start_x or px >= start_x + cols * tile_size:
        return None
    if py < start_y or py >= start_y + rows * tile_size:
        return None
    col = int((px - start_x) // tile_size)
    screen_row = int((py - start_y) // tile_size)
    return col, rows - 1 - screen_row
