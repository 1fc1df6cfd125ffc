from __future__ import annotations

import logging
from typing import Optional, Tuple

from esper import World

from lines.core.grid import Color, Grid
from lines.core.pathfinder import find_path
from lines.events.bus import (
    EventBus,
    EVENT_BOARD_LOCKED,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_REQUEST,
    EVENT_PIECE_MOVED,
)
from lines.utils.game_state import input_locked
from lines.utils.singletons import get_board, get_board_lock, get_config, get_selection

logger = logging.getLogger("lines.movement")

Position = Tuple[int, int]


class MovementSystem:
    """Moves the selected piece along an open path and locks the board until the turn resolves."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)

    def on_move_request(self, sender, **kwargs):
        start = kwargs.get('start')
        end = kwargs.get('end')
        if not start or not end:
            return
        self.try_move(tuple(start), tuple(end))

    def try_move(self, start: Position, end: Position) -> bool:
        grid = get_board(self.world).grid
        reason = self._rejection_reason(grid, start, end)
        path = None
        if reason is None:
            path = find_path(grid, start, end)
            if path is None:
                reason = 'no_path'
        if reason is not None:
            logger.debug("Move %s -> %s rejected: %s", start, end, reason)
            self.event_bus.emit(EVENT_MOVE_REJECTED, start=start, end=end, reason=reason)
            return False

        color = grid.color_at(*start)
        grid.set_color(*start, Color.EMPTY)
        grid.set_color(*end, color)

        # Keep the travelled path highlighted while the board is locked.
        selection = get_selection(self.world)
        selection.cell = None
        selection.path = list(path)
        selection.path_color = color

        duration = get_config(self.world).lock_duration
        lock = get_board_lock(self.world)
        lock.locked = True
        lock.remaining = duration
        lock.last_move = (start, end)

        logger.debug("Moved %s from %s to %s in %d steps", color.value, start, end, len(path) - 1)
        self.event_bus.emit(EVENT_PIECE_MOVED, start=start, end=end, path=path, color=color)
        self.event_bus.emit(EVENT_BOARD_LOCKED, duration=duration)
        return True

    def _rejection_reason(self, grid: Grid, start: Position, end: Position) -> Optional[str]:
        if input_locked(self.world):
            return 'locked'
        if not (grid.in_bounds(*start) and grid.in_bounds(*end)):
            return 'out_of_bounds'
        if start == end:
            return 'same_cell'
        if grid.is_empty(*start):
            return 'no_piece'
        if not grid.is_empty(*end):
            return 'occupied'
        return None
