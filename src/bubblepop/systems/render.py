from bubblepop.components.game_state import GamePhase
from bubblepop.constants import (
    BACKGROUND_COLOR,
    BUBBLE_COLORS,
    CELL_SIZE,
    SCORE_TEXT_POS,
    SELECTION_TEXT_POS,
)
from bubblepop.systems.grid_engine import GridEngine, GridSnapshot
from bubblepop.ui.layout import canvas_scale, canvas_to_window, cell_origin
from bubblepop.world import get_new_game_button
from esper import World

PADDING = 4
HIGHLIGHT_LIFT = 60


def highlight_color(color: tuple[int, int, int]) -> tuple[int, int, int]:
    return tuple(min(255, channel + HIGHLIGHT_LIFT) for channel in color)


class RenderSystem:
    """Draws engine snapshots with arcade primitives."""

    def __init__(self, world: World, engine: GridEngine, window):
        self.world = world
        self.engine = engine
        self.window = window
        self.last_snapshot: GridSnapshot | None = None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        snapshot = self.engine.snapshot()
        self.last_snapshot = snapshot
        try:
            arcade.get_window()
        except Exception:
            return
        scale = canvas_scale(self.window.width)
        arcade.draw_lbwh_rectangle_filled(0, 0, self.window.width, self.window.height, BACKGROUND_COLOR)
        if snapshot.phase is GamePhase.LOADING:
            self._draw_text(arcade, "LOADING...", 320, 469, scale, size=38)
            return
        self._draw_grid(arcade, snapshot, scale)
        self._draw_text(arcade, str(snapshot.score), *SCORE_TEXT_POS, scale)
        self._draw_text(arcade, str(snapshot.selection_score), *SELECTION_TEXT_POS, scale)
        self._draw_new_game_button(arcade, scale)
        if snapshot.phase is GamePhase.TERMINAL:
            self._draw_game_over(arcade, snapshot.score, scale)

    def _draw_grid(self, arcade, snapshot: GridSnapshot, scale: float):
        radius = (CELL_SIZE / 2 - PADDING) * scale
        for row, line in enumerate(snapshot.cells):
            for col, value in enumerate(line):
                if value == 0:
                    continue
                left, top = cell_origin(row, col)
                cx, cy = canvas_to_window(left + CELL_SIZE / 2, top + CELL_SIZE / 2, self.window.height, scale)
                color = BUBBLE_COLORS.get(value, arcade.color.GRAY)
                if snapshot.highlight[row][col]:
                    arcade.draw_circle_filled(cx, cy, radius, highlight_color(color))
                    arcade.draw_circle_outline(cx, cy, radius, arcade.color.WHITE, border_width=2)
                else:
                    arcade.draw_circle_filled(cx, cy, radius, color)

    def _draw_new_game_button(self, arcade, scale: float):
        button = get_new_game_button(self.world)
        fx, fy, fw, fh = button.frame
        left, top = canvas_to_window(fx, fy, self.window.height, scale)
        fill = arcade.color.DARK_SLATE_BLUE if not button.hovered else arcade.color.SLATE_BLUE
        arcade.draw_lbwh_rectangle_filled(left, top - fh * scale, fw * scale, fh * scale, fill)
        arcade.draw_lbwh_rectangle_outline(left, top - fh * scale, fw * scale, fh * scale, arcade.color.WHITE, border_width=2)
        self._draw_text(arcade, "NEW GAME", fx + fw / 2, fy + fh / 2, scale, size=24)

    def _draw_game_over(self, arcade, score: int, scale: float):
        left, top = canvas_to_window(105, 300, self.window.height, scale)
        width = 430 * scale
        height = 240 * scale
        arcade.draw_lbwh_rectangle_filled(left, top - height, width, height, (20, 10, 30, 220))
        self._draw_text(arcade, "GAME OVER", 320, 380, scale, size=38)
        self._draw_text(arcade, str(score), 320, 469, scale)

    def _draw_text(self, arcade, text: str, x: float, y: float, scale: float, size: int = 28):
        wx, wy = canvas_to_window(x, y, self.window.height, scale)
        arcade.draw_text(
            text,
            wx,
            wy,
            arcade.color.WHITE,
            size * scale,
            anchor_x="center",
            anchor_y="center",
        )
