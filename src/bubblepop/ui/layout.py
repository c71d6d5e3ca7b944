"""Canvas geometry shared by input mapping and rendering.

All frames use canvas coordinates with the origin at the top-left corner, as
laid out on a CANVAS_WIDTH x CANVAS_HEIGHT canvas. Window coordinates from
arcade have their origin at the bottom-left and are scaled to the window width.
"""
from typing import Tuple

from bubblepop.constants import CANVAS_HEIGHT, CANVAS_WIDTH, CELL_SIZE, PLAYGROUND_OFFSET

Frame = Tuple[float, float, float, float]


def canvas_scale(window_width: float) -> float:
    if window_width <= 0:
        return 1.0
    return window_width / CANVAS_WIDTH


def window_to_canvas(x: float, y: float, window_height: float, scale: float) -> Tuple[float, float]:
    """Convert arcade window coordinates into unscaled canvas coordinates."""
    return x / scale, (window_height - y) / scale


def canvas_to_window(x: float, y: float, window_height: float, scale: float) -> Tuple[float, float]:
    return x * scale, window_height - y * scale


def point_in_frame(frame: Frame, x: float, y: float) -> bool:
    fx, fy, fw, fh = frame
    return fx <= x <= fx + fw and fy <= y <= fy + fh


def hovered_cell(x: float, y: float, rows: int, cols: int) -> Tuple[int, int]:
    """Return the grid cell under a canvas point, clamped to the grid."""
    row = int((y - PLAYGROUND_OFFSET) // CELL_SIZE)
    col = int(x // CELL_SIZE)
    row = min(max(row, 0), rows - 1)
    col = min(max(col, 0), cols - 1)
    return row, col


def cell_origin(row: int, col: int) -> Tuple[float, float]:
    """Top-left canvas corner of a cell."""
    return col * CELL_SIZE, PLAYGROUND_OFFSET + row * CELL_SIZE


def default_window_size() -> Tuple[int, int]:
    return CANVAS_WIDTH, CANVAS_HEIGHT
