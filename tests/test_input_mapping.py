import pytest

from bubblepop.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_CURSOR_LEFT,
    EVENT_CURSOR_MOVED,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
    EventBus,
)
from bubblepop.systems.input import InputSystem
from bubblepop.ui.layout import canvas_scale, hovered_cell, point_in_frame, window_to_canvas
from bubblepop.world import create_world, get_cursor, get_new_game_button


class DummyWindow:
    def __init__(self, width=640, height=960):
        self.width = width
        self.height = height


@pytest.fixture
def setup_input():
    bus = EventBus()
    world = create_world()
    window = DummyWindow()
    input_sys = InputSystem(world, bus, window)
    return bus, world, window, input_sys


def capture(bus, name):
    events = []
    bus.subscribe(name, lambda sender, **payload: events.append(payload))
    return events


def to_window(window, cx, cy):
    """Canvas (top-left origin) to arcade window coordinates."""
    scale = canvas_scale(window.width)
    return cx * scale, window.height - cy * scale


def test_hovered_cell_clamps_to_grid():
    assert hovered_cell(32, 182, 10, 10) == (0, 0)
    assert hovered_cell(608, 758, 10, 10) == (9, 9)
    assert hovered_cell(-20, 140, 10, 10) == (0, 0)
    assert hovered_cell(700, 2000, 10, 10) == (9, 9)


def test_window_to_canvas_flips_and_scales():
    assert window_to_canvas(32, 778, 960, 1.0) == (32, 182)
    assert window_to_canvas(16, 389, 480, 0.5) == (32, 182)


def test_point_in_frame_edges_inclusive():
    frame = (200, 815, 240, 119)
    assert point_in_frame(frame, 200, 815)
    assert point_in_frame(frame, 440, 934)
    assert not point_in_frame(frame, 199, 815)


def test_move_over_first_cell_emits_cursor(setup_input):
    bus, world, window, _ = setup_input
    moved = capture(bus, EVENT_CURSOR_MOVED)
    bus.emit(EVENT_MOUSE_MOVE, x=32, y=window.height - 182, dx=0, dy=0)
    assert moved == [{"row": 0, "col": 0}]
    cursor = get_cursor(world)
    assert (cursor.row, cursor.col, cursor.in_region) == (0, 0, True)
    # Moving within the same cell does not repeat the event.
    bus.emit(EVENT_MOUSE_MOVE, x=40, y=window.height - 190, dx=8, dy=-8)
    assert len(moved) == 1


def test_move_above_grid_inside_frame_clamps_to_top_row(setup_input):
    bus, world, window, _ = setup_input
    moved = capture(bus, EVENT_CURSOR_MOVED)
    x, y = to_window(window, 330, 140)
    bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=0, dy=0)
    assert moved == [{"row": 0, "col": 5}]


def test_leaving_playground_emits_cursor_left(setup_input):
    bus, world, window, _ = setup_input
    left = capture(bus, EVENT_CURSOR_LEFT)
    x, y = to_window(window, 100, 300)
    bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=0, dy=0)
    x, y = to_window(window, 100, 800)
    bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=0, dy=0)
    assert left == [{}]
    assert get_cursor(world).in_region is False
    bus.emit(EVENT_MOUSE_MOVE, x=x, y=y - 5, dx=0, dy=-5)
    assert len(left) == 1


def test_click_in_playground_maps_cell(setup_input):
    bus, world, window, _ = setup_input
    clicks = capture(bus, EVENT_CELL_CLICK)
    x, y = to_window(window, 64 * 3 + 10, 150 + 64 * 7 + 10)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [{"row": 7, "col": 3}]


def test_right_click_ignored(setup_input):
    bus, world, window, _ = setup_input
    clicks = capture(bus, EVENT_CELL_CLICK)
    x, y = to_window(window, 100, 300)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    assert clicks == []


def test_new_game_button_hover_and_click(setup_input):
    bus, world, window, _ = setup_input
    requests = capture(bus, EVENT_NEW_GAME_REQUEST)
    clicks = capture(bus, EVENT_CELL_CLICK)
    x, y = to_window(window, 320, 870)
    bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=0, dy=0)
    assert get_new_game_button(world).hovered is True
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert len(requests) == 1
    assert clicks == []
    x, y = to_window(window, 20, 870)
    bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=0, dy=0)
    assert get_new_game_button(world).hovered is False


def test_scaled_window_maps_same_cell():
    bus = EventBus()
    world = create_world()
    window = DummyWindow(320, 480)
    InputSystem(world, bus, window)
    clicks = capture(bus, EVENT_CELL_CLICK)
    x, y = to_window(window, 64 * 9 + 5, 150 + 64 * 2 + 5)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [{"row": 2, "col": 9}]
