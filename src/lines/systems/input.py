from lines.constants import GRID_HEIGHT, GRID_WIDTH
from lines.events.bus import (
    EventBus,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
    EVENT_TILE_HOVER,
)
from lines.components.session_config import SessionConfig
from lines.ui.layout import compute_board_geometry, point_to_cell
from lines.utils.game_state import input_locked

# Arcade reports the left mouse button as 1 (arcade.MOUSE_BUTTON_LEFT).
MOUSE_BUTTON_LEFT = 1


class InputSystem:
    """Maps window coordinates onto board cells and emits tile events."""

    def __init__(self, event_bus: EventBus, window, world=None):
        self.event_bus = event_bus
        self.window = window
        self.world = world  # optional world ref for board size and lock state
        self._last_hover = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Other buttons fall through; BoardSystem listens to EVENT_MOUSE_PRESS for right-click.
        if button != MOUSE_BUTTON_LEFT:
            return
        if self.world is not None and input_locked(self.world):
            return
        cell = self.cell_at(x, y)
        if cell is not None:
            self.event_bus.emit(EVENT_TILE_CLICK, x=cell[0], y=cell[1], button=button)

    def on_mouse_move(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        cell = self.cell_at(x, y)
        if cell is None or cell == self._last_hover:
            return
        self._last_hover = cell
        self.event_bus.emit(EVENT_TILE_HOVER, x=cell[0], y=cell[1])

    def cell_at(self, x: float, y: float):
        cols, rows = self._board_size()
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, cols, rows)
        return point_to_cell(x, y, cols, rows, tile_size, start_x, start_y)

    def _board_size(self):
        if self.world is None:
            return GRID_WIDTH, GRID_HEIGHT
        configs = list(self.world.get_component(SessionConfig))
        if not configs:
            return GRID_WIDTH, GRID_HEIGHT
        config = configs[0][1]
        return config.width, config.height
