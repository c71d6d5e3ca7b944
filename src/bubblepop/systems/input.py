from esper import World

from bubblepop.constants import GRID_COLS, GRID_ROWS, PLAYGROUND_FRAME
from bubblepop.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_CURSOR_LEFT,
    EVENT_CURSOR_MOVED,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
)
from bubblepop.ui.layout import canvas_scale, hovered_cell, point_in_frame, window_to_canvas
from bubblepop.world import get_cursor, get_new_game_button

# arcade.MOUSE_BUTTON_LEFT; kept numeric so the system does not import arcade.
LEFT_BUTTON = 1


class InputSystem:
    """Maps raw pointer events onto grid cells and the New Game button."""

    def __init__(self, world: World, event_bus: EventBus, window, *, rows: int = GRID_ROWS, cols: int = GRID_COLS):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.rows = rows
        self.cols = cols
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_move(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        cx, cy = self._to_canvas(x, y)
        button = get_new_game_button(self.world)
        button.hovered = point_in_frame(button.frame, cx, cy)
        cursor = get_cursor(self.world)
        if not point_in_frame(PLAYGROUND_FRAME, cx, cy):
            if cursor.in_region:
                cursor.in_region = False
                self.event_bus.emit(EVENT_CURSOR_LEFT)
            return
        row, col = hovered_cell(cx, cy, self.rows, self.cols)
        changed = not cursor.in_region or (cursor.row, cursor.col) != (row, col)
        cursor.row, cursor.col, cursor.in_region = row, col, True
        if changed:
            self.event_bus.emit(EVENT_CURSOR_MOVED, row=row, col=col)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        if kwargs.get('button', LEFT_BUTTON) != LEFT_BUTTON:
            return
        cx, cy = self._to_canvas(x, y)
        if point_in_frame(PLAYGROUND_FRAME, cx, cy):
            row, col = hovered_cell(cx, cy, self.rows, self.cols)
            cursor = get_cursor(self.world)
            cursor.row, cursor.col, cursor.in_region = row, col, True
            self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)
        elif point_in_frame(get_new_game_button(self.world).frame, cx, cy):
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)

    def _to_canvas(self, x: float, y: float):
        scale = canvas_scale(self.window.width)
        return window_to_canvas(float(x), float(y), self.window.height, scale)
