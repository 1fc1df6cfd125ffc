from __future__ import annotations

import logging

from esper import World

from lines.core.grid import Color
from lines.core.line_matcher import matched_cells, scan_runs
from lines.core.scoring import COMBO_BASE, compute_score, next_combo
from lines.events.bus import (
    EventBus,
    EVENT_BOARD_UNLOCKED,
    EVENT_COMBO_CHANGED,
    EVENT_MATCH_CLEARED,
    EVENT_MATCH_FOUND,
    EVENT_PATH_PREVIEW,
    EVENT_SCORE_CHANGED,
    EVENT_SPAWN_REQUEST,
    EVENT_TICK,
    EVENT_TURN_RESOLVED,
)
from lines.utils.singletons import (
    get_board,
    get_board_lock,
    get_config,
    get_game_state,
    get_score_state,
    get_selection,
)

logger = logging.getLogger("lines.turn")


class TurnSystem:
    """Resolves a turn once the post-move lock runs out.

    A turn either destroys every run of at least ``min_run_length`` pieces
    (scoring it and growing the combo) or, when nothing lines up, asks for
    the next pieces to be spawned and resets the combo.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        lock = get_board_lock(self.world)
        if not lock.locked:
            return
        dt = kwargs.get('dt', 1/60)
        lock.remaining -= dt
        if lock.remaining > 0:
            return
        lock.locked = False
        lock.remaining = 0.0
        selection = get_selection(self.world)
        selection.clear_path()
        logger.debug("Board unlocked after move %s", lock.last_move)
        self.event_bus.emit(EVENT_BOARD_UNLOCKED)
        self.event_bus.emit(EVENT_PATH_PREVIEW, path=None, color=None)
        self.resolve_turn()

    def resolve_turn(self) -> bool:
        """Scan the board and apply the outcome; returns True when pieces were destroyed."""
        config = get_config(self.world)
        grid = get_board(self.world).grid
        score_state = get_score_state(self.world)
        game_state = get_game_state(self.world)
        game_state.turns += 1

        results = scan_runs(grid, config.min_run_length)
        if results is None:
            self.event_bus.emit(EVENT_SPAWN_REQUEST, reason='no_match')
            if score_state.combo != COMBO_BASE:
                score_state.combo = COMBO_BASE
                self.event_bus.emit(EVENT_COMBO_CHANGED, combo=score_state.combo)
            self.event_bus.emit(EVENT_TURN_RESOLVED, matched=False, turn=game_state.turns)
            return False

        delta = compute_score(results, config.min_run_length, score_state.combo)
        positions = matched_cells(results)
        directions = sum(1 for result in results if result.status)
        self.event_bus.emit(EVENT_MATCH_FOUND, results=results, positions=positions, directions=directions)

        destroyed = 0
        for x, y in positions:
            if grid.color_at(x, y) is not Color.EMPTY:
                grid.set_color(x, y, Color.EMPTY)
                destroyed += 1
        score_state.score += delta
        score_state.destroyed_pieces += destroyed
        logger.info(
            "Turn %d: destroyed %d piece(s) in %d direction(s) for %d point(s) at x%s",
            game_state.turns, destroyed, directions, delta, score_state.combo,
        )
        self.event_bus.emit(EVENT_MATCH_CLEARED, positions=positions, destroyed=destroyed)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=score_state.score, delta=delta)

        score_state.combo = next_combo(score_state.combo, config.combo_growth)
        self.event_bus.emit(EVENT_COMBO_CHANGED, combo=score_state.combo)
        self.event_bus.emit(EVENT_TURN_RESOLVED, matched=True, turn=game_state.turns)
        return True
