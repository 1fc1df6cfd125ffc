from typing import Any, Optional

from esper import World

from lines.components.game_state import GameMode
from lines.events.bus import EventBus, EVENT_GAME_OVER, EVENT_NEW_GAME_REQUEST
from lines.rendering.board_renderer import BoardRenderer
from lines.rendering.context import RenderContext, build_render_context
from lines.rendering.hud_renderer import HudRenderer
from lines.ui.layout import compute_board_geometry
from lines.utils.singletons import (
    get_board,
    get_config,
    get_game_state,
    get_next_pieces,
    get_score_state,
    get_selection,
)

PADDING = 4


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        self._board_renderer = BoardRenderer(padding=PADDING)
        self._hud_renderer = HudRenderer()
        self._render_ctx: Optional[RenderContext] = None
        self._game_over_summary: Optional[dict[str, Any]] = None
        self._last_tile_layout: dict = {}

    def on_game_over(self, sender, **kwargs):
        self._game_over_summary = dict(kwargs)

    def on_new_game_request(self, sender, **kwargs):
        self._game_over_summary = None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active Arcade window only the layout cache is built.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        config = get_config(self.world)
        tile_size, board_left, board_bottom = compute_board_geometry(
            self.window.width, self.window.height, config.width, config.height
        )
        ctx = build_render_context(
            world=self.world,
            window_width=self.window.width,
            window_height=self.window.height,
            cols=config.width,
            rows=config.height,
            tile_size=tile_size,
            board_left=board_left,
            board_bottom=board_bottom,
        )
        self._render_ctx = ctx
        self._last_tile_layout = self._board_renderer.render(
            arcade, ctx, get_board(self.world).grid, get_selection(self.world), headless=headless
        )
        if headless:
            return
        self._hud_renderer.render(arcade, ctx, get_score_state(self.world), get_next_pieces(self.world).colors)
        if get_game_state(self.world).mode == GameMode.GAME_OVER:
            self._hud_renderer.render_game_over(arcade, ctx, self._game_over_summary)

    @property
    def game_over_summary(self) -> Optional[dict]:
        return self._game_over_summary

    def get_tile_at_point(self, x: float, y: float):
        """Return the cell whose drawn piece area contains the point, using the last layout."""
        for cell, entry in self._last_tile_layout.items():
            cx, cy = entry["center"]
            radius = entry["radius"]
            dx = x - cx
            dy = y - cy
            if dx * dx + dy * dy <= radius * radius:
                return cell
        return None
