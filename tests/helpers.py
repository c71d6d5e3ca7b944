from __future__ import annotations

import random
from typing import Sequence

from bubblepop.components.game_state import GamePhase
from bubblepop.systems.grid_engine import GridEngine
from bubblepop.world import create_world


def make_engine(cells: Sequence[Sequence[int]] | None = None, *, seed: int = 1234) -> GridEngine:
    """Build an engine on a fresh world, optionally preloaded with an explicit grid.

    The grid shape follows the given cells; without cells a seeded 10x10 game is dealt.
    """
    world = create_world(random.Random(seed))
    if cells is None:
        engine = GridEngine(world, phase=GamePhase.ACTIVE)
        return engine
    engine = GridEngine(world, rows=len(cells), cols=len(cells[0]), phase=GamePhase.ACTIVE)
    engine.load_grid(cells)
    return engine


def column(cells: Sequence[Sequence[int]], col: int) -> list[int]:
    return [line[col] for line in cells]


CHECKERBOARD = [[1 if (r + c) % 2 == 0 else 2 for c in range(10)] for r in range(10)]
