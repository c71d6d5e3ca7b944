from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple

from bubblepop.constants import EMPTY, MIN_GROUP_SIZE, SCORE_FACTOR

Position = Tuple[int, int]
Cells = Sequence[Sequence[int]]


@dataclass(slots=True)
class GravityMove:
    source: Position
    target: Position
    color: int


def in_bounds(cells: Cells, row: int, col: int) -> bool:
    return 0 <= row < len(cells) and 0 <= col < len(cells[0])


def neighbors(row: int, col: int) -> List[Position]:
    """Orthogonal neighbors; callers filter out-of-bounds entries."""
    return [
        (row, col + 1),
        (row, col - 1),
        (row + 1, col),
        (row - 1, col),
    ]


def flood_fill(cells: Cells, row: int, col: int) -> Set[Position]:
    """Collect the same-colored group connected to (row, col).

    Returns an empty set when the start cell is outside the grid or empty.
    Uses an explicit stack so grid size is not limited by recursion depth.
    """
    if not cells or not in_bounds(cells, row, col):
        return set()
    color = cells[row][col]
    if color == EMPTY:
        return set()
    group: Set[Position] = {(row, col)}
    stack: List[Position] = [(row, col)]
    while stack:
        current = stack.pop()
        for nxt in neighbors(*current):
            if nxt in group or not in_bounds(cells, *nxt):
                continue
            if cells[nxt[0]][nxt[1]] != color:
                continue
            group.add(nxt)
            stack.append(nxt)
    return group


def selection_score(size: int) -> int:
    """Points for popping a group of the given size: n * (n - 1) * 10."""
    if size < MIN_GROUP_SIZE:
        return 0
    return size * (size - 1) * SCORE_FACTOR


def compact_columns(cells: List[List[int]]) -> List[GravityMove]:
    """Let bubbles fall to the bottom of their column, keeping their order.

    Scans each column bottom-up with a running count of empty cells; every
    bubble moves down by that count. Mutates cells in place and returns the
    moves that were applied.
    """
    moves: List[GravityMove] = []
    if not cells:
        return moves
    rows = len(cells)
    for col in range(len(cells[0])):
        offset = 0
        for row in range(rows - 1, -1, -1):
            color = cells[row][col]
            if color == EMPTY:
                offset += 1
                continue
            if offset == 0:
                continue
            cells[row][col] = EMPTY
            cells[row + offset][col] = color
            moves.append(GravityMove(source=(row, col), target=(row + offset, col), color=color))
    return moves


def has_legal_move(cells: Cells) -> bool:
    """Return True if any two orthogonally adjacent bubbles share a color.

    Checking the right and lower neighbor of every cell covers each adjacent
    pair exactly once.
    """
    if not cells:
        return False
    rows = len(cells)
    cols = len(cells[0])
    for row in range(rows):
        for col in range(cols):
            color = cells[row][col]
            if color == EMPTY:
                continue
            if col + 1 < cols and cells[row][col + 1] == color:
                return True
            if row + 1 < rows and cells[row + 1][col] == color:
                return True
    return False


def is_compacted(cells: Cells) -> bool:
    """True when no empty cell sits below a bubble in any column."""
    if not cells:
        return True
    for col in range(len(cells[0])):
        seen_bubble = False
        for row in range(len(cells)):
            if cells[row][col] != EMPTY:
                seen_bubble = True
            elif seen_bubble:
                return False
    return True


def random_cells(rows: int, cols: int, color_count: int, rng: random.Random) -> List[List[int]]:
    return [[rng.randint(1, color_count) for _ in range(cols)] for _ in range(rows)]
