from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from lines.components.board import Board
from lines.components.board_lock import BoardLock
from lines.components.game_state import GameState
from lines.components.next_pieces import NextPieces
from lines.components.score_state import ScoreState
from lines.components.selection import Selection
from lines.components.session_config import SessionConfig

C = TypeVar("C")


def get_singleton(world: World, component_type: Type[C]) -> C:
    """Return the only instance of component_type, raising if none exists."""
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} component not found")


def get_or_create(world: World, component_type: Type[C]) -> C:
    """Return the shared component instance, creating it with defaults if absent."""
    existing = list(world.get_component(component_type))
    if existing:
        return existing[0][1]
    world.create_entity(component_type())
    return list(world.get_component(component_type))[0][1]


def get_board(world: World) -> Board:
    return get_singleton(world, Board)


def get_config(world: World) -> SessionConfig:
    return get_singleton(world, SessionConfig)


def get_game_state(world: World) -> GameState:
    return get_singleton(world, GameState)


def get_score_state(world: World) -> ScoreState:
    return get_singleton(world, ScoreState)


def get_next_pieces(world: World) -> NextPieces:
    return get_singleton(world, NextPieces)


def get_selection(world: World) -> Selection:
    return get_or_create(world, Selection)


def get_board_lock(world: World) -> BoardLock:
    return get_or_create(world, BoardLock)
