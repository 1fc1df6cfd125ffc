from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from lines.core.grid import Color
from lines.rendering.colors import COMBO_ACTIVE_COLOR, PIECE_COLORS, TEXT_COLOR

if TYPE_CHECKING:
    from lines.components.score_state import ScoreState
    from lines.rendering.context import RenderContext


class HudRenderer:
    """Next-pieces preview, score and combo above the board, plus the game-over overlay."""

    def render(self, arcade, ctx: RenderContext, score: ScoreState, next_colors: List[Color]) -> None:
        top = ctx.window_height - 30
        arcade.draw_text("Next:", ctx.board_left, top, TEXT_COLOR, 16, anchor_y="center")
        size = 24
        for index, color in enumerate(next_colors):
            cx = ctx.board_left + 80 + index * (size + 12)
            arcade.draw_circle_filled(cx, top, size / 2, PIECE_COLORS.get(color, TEXT_COLOR))
        arcade.draw_text(
            f"Score: {score.score}",
            ctx.board_right,
            top,
            TEXT_COLOR,
            16,
            anchor_x="right",
            anchor_y="center",
        )
        combo_color = COMBO_ACTIVE_COLOR if score.combo > 1 else TEXT_COLOR
        arcade.draw_text(
            f"x{score.combo:g}",
            ctx.board_right,
            top - 32,
            combo_color,
            14,
            anchor_x="right",
            anchor_y="center",
        )

    def render_game_over(self, arcade, ctx: RenderContext, summary: Optional[dict]) -> None:
        arcade.draw_lrbt_rectangle_filled(0, ctx.window_width, 0, ctx.window_height, (0, 0, 0, 180))
        cx = ctx.window_width / 2
        cy = ctx.window_height / 2
        arcade.draw_text("Game Over", cx, cy + 60, TEXT_COLOR, 32, anchor_x="center", anchor_y="center")
        if summary:
            minutes, seconds = divmod(int(summary.get("elapsed", 0)), 60)
            hours, minutes = divmod(minutes, 60)
            arcade.draw_text(
                f"Game time: {hours:02d}:{minutes:02d}:{seconds:02d}",
                cx, cy + 10, TEXT_COLOR, 16, anchor_x="center", anchor_y="center",
            )
            arcade.draw_text(
                f"Score {summary.get('score', 0)} from {summary.get('destroyed', 0)} pieces "
                f"({summary.get('score_per_piece', 0):.3f} per piece)",
                cx, cy - 20, TEXT_COLOR, 14, anchor_x="center", anchor_y="center",
            )
        arcade.draw_text("Press N for a new game", cx, cy - 60, TEXT_COLOR, 14, anchor_x="center", anchor_y="center")
