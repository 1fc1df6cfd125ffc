from typing import Dict, Tuple

from lines.core.grid import Color

RGB = Tuple[int, int, int]

PIECE_COLORS: Dict[Color, RGB] = {
    Color.RED: (200, 60, 60),
    Color.ORANGE: (220, 130, 50),
    Color.YELLOW: (220, 205, 80),
    Color.GREEN: (80, 170, 80),
    Color.BLUE: (70, 100, 200),
    Color.PURPLE: (160, 80, 170),
    Color.WHITE: (235, 235, 235),
}

CELL_BACKGROUND: RGB = (48, 48, 56)
CELL_OUTLINE: RGB = (30, 30, 36)
SELECTION_OUTLINE: RGB = (255, 255, 255)
TEXT_COLOR: RGB = (230, 230, 230)
COMBO_ACTIVE_COLOR: RGB = (255, 200, 60)


def tint(rgb: RGB, alpha: int) -> Tuple[int, int, int, int]:
    r, g, b = rgb
    return r, g, b, alpha
