from esper import World

from lines.core.pathfinder import find_path
from lines.events.bus import EventBus, EVENT_PATH_PREVIEW, EVENT_TILE_DESELECTED, EVENT_TILE_HOVER
from lines.utils.game_state import input_locked
from lines.utils.singletons import get_board, get_selection


class PathPreviewSystem:
    """Highlights the route the selected piece would take to the hovered cell."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_HOVER, self.on_tile_hover)
        self.event_bus.subscribe(EVENT_TILE_DESELECTED, self.on_tile_deselected)

    def on_tile_hover(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        if input_locked(self.world):
            return
        selection = get_selection(self.world)
        if selection.cell is None:
            return
        grid = get_board(self.world).grid
        if not grid.in_bounds(x, y):
            return
        path = None
        if (x, y) != selection.cell:
            path = find_path(grid, selection.cell, (x, y))
        if path:
            selection.path = path
            selection.path_color = grid.color_at(*selection.cell)
        else:
            selection.clear_path()
        self.event_bus.emit(EVENT_PATH_PREVIEW, path=path, color=selection.path_color)

    def on_tile_deselected(self, sender, **kwargs):
        self.event_bus.emit(EVENT_PATH_PREVIEW, path=None, color=None)
