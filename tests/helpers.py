from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from esper import World

from lines.core.grid import Color, Grid
from lines.events.bus import EVENT_TICK, EventBus
from lines.systems.board import BoardSystem
from lines.systems.game_flow_system import GameFlowSystem
from lines.systems.movement import MovementSystem
from lines.systems.path_preview import PathPreviewSystem
from lines.systems.spawn_system import SpawnSystem
from lines.systems.turn_system import TurnSystem
from lines.world import create_world


class FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


@dataclass
class Session:
    bus: EventBus
    world: World
    board: BoardSystem
    spawn: SpawnSystem
    movement: MovementSystem
    preview: PathPreviewSystem
    turns: TurnSystem
    flow: GameFlowSystem
    clock: FakeClock

    @property
    def grid(self) -> Grid:
        return self.board.grid


def build_session(*, seed: int = 1234, **world_kwargs) -> Session:
    """Wire the gameplay systems on a fresh world without starting a game."""

    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed), **world_kwargs)
    clock = FakeClock()
    return Session(
        bus=bus,
        world=world,
        board=BoardSystem(world, bus),
        spawn=SpawnSystem(world, bus),
        movement=MovementSystem(world, bus),
        preview=PathPreviewSystem(world, bus),
        turns=TurnSystem(world, bus),
        flow=GameFlowSystem(world, bus, clock=clock),
        clock=clock,
    )


def drive_ticks(bus: EventBus, count: int = 30, dt: float = 0.05) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def place(grid: Grid, cells: Iterable[Sequence[int]], color: Color) -> None:
    for x, y in cells:
        grid.set_color(x, y, color)
