from __future__ import annotations

import logging
import random
from typing import List, Tuple

from esper import World

from lines.core.grid import Color
from lines.core.random_picks import EmptySourceSet, pick_distinct, random_color
from lines.events.bus import (
    EventBus,
    EVENT_BOARD_FULL,
    EVENT_PIECES_SPAWNED,
    EVENT_PREVIEW_CHANGED,
    EVENT_SPAWN_REQUEST,
)
from lines.utils.singletons import get_board, get_config, get_next_pieces

logger = logging.getLogger("lines.spawn")

Piece = Tuple[Tuple[int, int], Color]


class SpawnSystem:
    """Drops the previewed pieces onto random empty cells and rolls the next preview."""

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None):
        self.world = world
        self.event_bus = event_bus
        candidate_rng = rng or getattr(world, "random", None)
        self.rng = candidate_rng if isinstance(candidate_rng, random.Random) else random.Random()
        self.event_bus.subscribe(EVENT_SPAWN_REQUEST, self.on_spawn_request)

    def on_spawn_request(self, sender, **kwargs):
        self.spawn()

    def spawn(self) -> List[Piece]:
        grid = get_board(self.world).grid
        next_pieces = get_next_pieces(self.world)
        empty_cells = grid.empty_cells()
        try:
            targets = pick_distinct(empty_cells, len(next_pieces.colors), self.rng)
        except EmptySourceSet as exc:
            logger.info("No room for %d new piece(s): %s", len(next_pieces.colors), exc)
            self.event_bus.emit(EVENT_BOARD_FULL, empty=exc.available, requested=exc.requested)
            return []

        pieces: List[Piece] = list(zip(targets, next_pieces.colors))
        for (x, y), color in pieces:
            grid.set_color(x, y, color)
        self.roll_preview()
        logger.debug("Spawned %s", [(cell, color.value) for cell, color in pieces])
        self.event_bus.emit(EVENT_PIECES_SPAWNED, pieces=pieces)

        if not grid.empty_cells():
            self.event_bus.emit(EVENT_BOARD_FULL, empty=0, requested=len(next_pieces.colors))
        return pieces

    def roll_preview(self) -> List[Color]:
        count = get_config(self.world).spawn_count
        next_pieces = get_next_pieces(self.world)
        next_pieces.colors = [random_color(self.rng) for _ in range(count)]
        self.event_bus.emit(EVENT_PREVIEW_CHANGED, colors=list(next_pieces.colors))
        return next_pieces.colors
