import logging

from esper import World

from lines.components.board import Board
from lines.core.grid import Grid
from lines.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_MOVE_REQUEST,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
)
from lines.utils.game_state import input_locked
from lines.utils.singletons import get_config, get_selection

logger = logging.getLogger("lines.board")

# Arcade reports the right mouse button as 4 (arcade.MOUSE_BUTTON_RIGHT).
MOUSE_BUTTON_RIGHT = 4


class BoardSystem:
    """Owns the board entity and turns tile clicks into selections and move requests."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        config = get_config(world)
        self.board_entity = self.world.create_entity(Board(width=config.width, height=config.height))
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    @property
    def grid(self) -> Grid:
        return self.world.component_for_entity(self.board_entity, Board).grid

    def on_tile_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        if input_locked(self.world):
            return
        grid = self.grid
        if not grid.in_bounds(x, y):
            return
        selection = get_selection(self.world)
        if grid.is_empty(x, y):
            if selection.cell is not None:
                self.event_bus.emit(EVENT_MOVE_REQUEST, start=selection.cell, end=(x, y))
            return
        # A piece with no empty neighbour cannot go anywhere.
        if grid.is_surrounded(x, y):
            return
        if selection.cell == (x, y):
            self.deselect(reason='toggle')
            return
        selection.cell = (x, y)
        selection.clear_path()
        self.event_bus.emit(EVENT_TILE_SELECTED, x=x, y=y, color=grid.color_at(x, y))

    def on_mouse_press(self, sender, **kwargs):
        # Right-click always clears the current selection.
        if kwargs.get('button') != MOUSE_BUTTON_RIGHT:
            return
        if input_locked(self.world):
            return
        self.deselect(reason='right_click')

    def deselect(self, reason: str) -> None:
        selection = get_selection(self.world)
        prev = selection.cell
        if prev is None:
            return
        selection.clear()
        logger.debug("Deselected %s (%s)", prev, reason)
        self.event_bus.emit(EVENT_TILE_DESELECTED, reason=reason, prev=prev)

