from __future__ import annotations

import logging
from time import monotonic
from typing import Callable

from esper import World

from lines.components.game_state import GameMode
from lines.core.random_picks import random_color
from lines.core.scoring import COMBO_BASE
from lines.events.bus import (
    EventBus,
    EVENT_BOARD_FULL,
    EVENT_COMBO_CHANGED,
    EVENT_GAME_OVER,
    EVENT_GAME_START,
    EVENT_NEW_GAME_REQUEST,
    EVENT_PREVIEW_CHANGED,
    EVENT_SCORE_CHANGED,
    EVENT_SPAWN_REQUEST,
)
from lines.utils.game_state import set_game_mode
from lines.utils.singletons import (
    get_board,
    get_board_lock,
    get_config,
    get_game_state,
    get_next_pieces,
    get_score_state,
    get_selection,
)

logger = logging.getLogger("lines.flow")


class GameFlowSystem:
    """Starts sessions, ends them when the board fills up, and resets for a new game."""

    def __init__(self, world: World, event_bus: EventBus, *, clock: Callable[[], float] | None = None):
        self.world = world
        self.event_bus = event_bus
        self._clock = clock or monotonic
        self.event_bus.subscribe(EVENT_GAME_START, self.on_game_start)
        self.event_bus.subscribe(EVENT_BOARD_FULL, self.on_board_full)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)

    def on_game_start(self, sender, **kwargs):
        self.start_game()

    def start_game(self) -> None:
        state = get_game_state(self.world)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        state.started_at = None
        state.ended_at = None
        self.event_bus.emit(EVENT_SPAWN_REQUEST, reason='game_start')
        # The clock starts with the first successful spawn.
        if state.mode == GameMode.PLAYING and state.started_at is None:
            state.started_at = self._clock()
            logger.info("Game started on a %dx%d board", get_config(self.world).width, get_config(self.world).height)

    def on_board_full(self, sender, **kwargs):
        state = get_game_state(self.world)
        if state.mode == GameMode.GAME_OVER:
            return
        state.ended_at = self._clock()
        if state.started_at is None:
            state.started_at = state.ended_at
        score_state = get_score_state(self.world)
        destroyed = score_state.destroyed_pieces
        score_per_piece = round(score_state.score / destroyed, 3) if destroyed else 0.0
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        get_selection(self.world).clear()
        logger.info(
            "Game over after %d turn(s): score %d, %d piece(s) destroyed, %.3f per piece, %.1fs",
            state.turns, score_state.score, destroyed, score_per_piece, state.elapsed,
        )
        self.event_bus.emit(
            EVENT_GAME_OVER,
            score=score_state.score,
            destroyed=destroyed,
            elapsed=state.elapsed,
            score_per_piece=score_per_piece,
            turns=state.turns,
        )

    def on_new_game_request(self, sender, **kwargs):
        self.reset()
        self.start_game()

    def reset(self) -> None:
        get_board(self.world).grid.clear()
        get_selection(self.world).clear()
        lock = get_board_lock(self.world)
        lock.locked = False
        lock.remaining = 0.0
        lock.last_move = None
        score_state = get_score_state(self.world)
        score_state.score = 0
        score_state.combo = COMBO_BASE
        score_state.destroyed_pieces = 0
        get_game_state(self.world).turns = 0
        next_pieces = get_next_pieces(self.world)
        rng = getattr(self.world, "random", None)
        next_pieces.colors = [random_color(rng) for _ in range(get_config(self.world).spawn_count)]
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=0)
        self.event_bus.emit(EVENT_COMBO_CHANGED, combo=COMBO_BASE)
        self.event_bus.emit(EVENT_PREVIEW_CHANGED, colors=list(next_pieces.colors))
