import random

from esper import World
from .events.bus import EventBus
from lines.components.board_lock import BoardLock
from lines.components.game_state import GameState, GameMode
from lines.components.next_pieces import NextPieces
from lines.components.score_state import ScoreState
from lines.components.selection import Selection
from lines.components.session_config import SessionConfig
from lines.constants import (
    COMBO_GROWTH,
    GRID_HEIGHT,
    GRID_WIDTH,
    LOCK_DURATION,
    MIN_RUN_LENGTH,
    SPAWN_COUNT,
)
from lines.core.random_picks import random_color


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
    min_run_length: int = MIN_RUN_LENGTH,
    spawn_count: int = SPAWN_COUNT,
    combo_growth: float = COMBO_GROWTH,
    lock_duration: float = LOCK_DURATION,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    config = SessionConfig(
        width=width,
        height=height,
        min_run_length=min_run_length,
        spawn_count=spawn_count,
        combo_growth=combo_growth,
        lock_duration=lock_duration,
    )
    # Register the global session resources on a single state entity.
    world.create_entity(
        GameState(mode=initial_mode),
        config,
        ScoreState(),
        NextPieces(colors=[random_color(world.random) for _ in range(config.spawn_count)]),
        Selection(),
        BoardLock(),
    )
    return world
