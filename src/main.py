"""Entry point for the Five Lines puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import argparse
import logging
import random

from arcade import Window, run, set_background_color, color, key
from lines.world import create_world
from lines.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MIN_RUN_LENGTH,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from lines.events.bus import (
    EventBus,
    EVENT_GAME_START,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
    EVENT_TICK,
)
from lines.systems.board import BoardSystem
from lines.systems.game_flow_system import GameFlowSystem
from lines.systems.input import InputSystem
from lines.systems.movement import MovementSystem
from lines.systems.path_preview import PathPreviewSystem
from lines.systems.render import RenderSystem
from lines.systems.spawn_system import SpawnSystem
from lines.systems.turn_system import TurnSystem

log = logging.getLogger("lines")


class LinesWindow(Window):
    def __init__(self, *, width: int, height: int, min_run_length: int, seed: int | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(
            self.event_bus,
            width=width,
            height=height,
            min_run_length=min_run_length,
            rng=random.Random(seed),
        )
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.spawn_system = SpawnSystem(self.world, self.event_bus)
        self.movement_system = MovementSystem(self.world, self.event_bus)
        self.path_preview_system = PathPreviewSystem(self.world, self.event_bus)
        self.turn_system = TurnSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        # InputSystem expects (event_bus, window)
        self.input_system = InputSystem(self.event_bus, self, world=self.world)
        set_background_color(color.BLACK)
        self.event_bus.emit(EVENT_GAME_START)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.N:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Line up colored pieces to clear them from the board.")
    parser.add_argument("--width", type=int, default=GRID_WIDTH, help="Board width in cells")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT, help="Board height in cells")
    parser.add_argument("--min-run", type=int, default=MIN_RUN_LENGTH,
                        help="Pieces in a line needed to clear them")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games")
    parser.add_argument("--debug", action="store_true", help="Enable debug-level logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log.info("Starting %dx%d board, lines of %d", args.width, args.height, args.min_run)
    LinesWindow(width=args.width, height=args.height, min_run_length=args.min_run, seed=args.seed)
    run()

if __name__ == "__main__":
    main()
