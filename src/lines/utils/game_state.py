from __future__ import annotations

from esper import World

from lines.components.board_lock import BoardLock
from lines.components.game_state import GameMode, GameState
from lines.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the global game mode and emit a change event when it differs."""

    for _, state in world.get_component(GameState):
        previous_mode = state.mode
        if state.mode != mode:
            state.mode = mode
            event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)
        return
    # No existing GameState component; create a new one.
    world.create_entity(GameState(mode=mode))
    event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=None, new_mode=mode)


def is_playing(world: World) -> bool:
    states = list(world.get_component(GameState))
    if not states:
        return True
    return states[0][1].mode == GameMode.PLAYING


def input_locked(world: World) -> bool:
    """True while the board refuses moves: game over or inside the post-move lock."""
    if not is_playing(world):
        return True
    for _, lock in world.get_component(BoardLock):
        return lock.locked
    return False
