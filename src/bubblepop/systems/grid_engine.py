"""Core game logic: selection, popping, gravity and end-of-game detection.

The engine keeps its state as components on a single entity of an esper World.
Other systems never touch those components directly; they call the engine and
read :class:`GridSnapshot` copies.
"""
from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from esper import World

from bubblepop.components.game_state import GamePhase, GameState
from bubblepop.components.grid import Grid
from bubblepop.components.highlight import HighlightMap
from bubblepop.components.score import ScoreBoard
from bubblepop.constants import COLOR_COUNT, EMPTY, GRID_COLS, GRID_ROWS
from bubblepop.systems import grid_ops
from bubblepop.systems.grid_ops import GravityMove, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridSnapshot:
    """Read-only copy of the engine state handed to renderers and tests."""
    cells: Tuple[Tuple[int, ...], ...]
    highlight: Tuple[Tuple[bool, ...], ...]
    score: int
    selection_score: int
    phase: GamePhase

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def highlighted_positions(self) -> List[Position]:
        return [
            (row, col)
            for row, line in enumerate(self.highlight)
            for col, lit in enumerate(line)
            if lit
        ]


@dataclass(frozen=True)
class PopResult:
    """What the most recent successful commit_pop removed and moved."""
    positions: Tuple[Position, ...]
    points: int
    moves: Tuple[GravityMove, ...]


class GridEngine:
    def __init__(
        self,
        world: World,
        *,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        color_count: int = COLOR_COUNT,
        rng: random.Random | None = None,
        phase: GamePhase = GamePhase.LOADING,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid must have at least one cell, got {rows}x{cols}")
        if color_count < 1:
            raise ValueError(f"color_count must be positive, got {color_count}")
        self.world = world
        self.color_count = color_count
        self._rng = rng or getattr(world, "random", None) or random.Random()
        # Held for the whole of every public call; flood fill, pop and compaction are not atomic.
        self._lock = threading.Lock()
        self._last_pop: PopResult | None = None
        self.entity = world.create_entity(
            Grid(rows=rows, cols=cols),
            HighlightMap(rows=rows, cols=cols),
            ScoreBoard(),
            GameState(phase=phase),
        )
        self._fill_random()

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------

    @property
    def _grid(self) -> Grid:
        return self.world.component_for_entity(self.entity, Grid)

    @property
    def _highlight(self) -> HighlightMap:
        return self.world.component_for_entity(self.entity, HighlightMap)

    @property
    def _scores(self) -> ScoreBoard:
        return self.world.component_for_entity(self.entity, ScoreBoard)

    @property
    def _state(self) -> GameState:
        return self.world.component_for_entity(self.entity, GameState)

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def score(self) -> int:
        return self._scores.score

    @property
    def selection_score(self) -> int:
        return self._scores.selection_score

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def last_pop(self) -> PopResult | None:
        return self._last_pop

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def new_game(self) -> None:
        """Refill the grid at random and reset scores and highlight.

        While LOADING the phase is left for mark_ready to change.
        """
        with self._lock:
            self._fill_random()
            self._settle_phase()
            logger.debug("New game started (%dx%d, phase=%s)", self.rows, self.cols, self.phase.name)
            self._check_invariants()

    def mark_ready(self) -> bool:
        """Leave LOADING once the host signals its assets are ready."""
        with self._lock:
            state = self._state
            if state.phase is not GamePhase.LOADING:
                return False
            state.phase = GamePhase.ACTIVE if self._has_legal_move() else GamePhase.TERMINAL
            logger.debug("Engine ready, phase=%s", state.phase.name)
            return True

    def evaluate_selection(self, row: int, col: int) -> int:
        """Highlight the group at (row, col) and return its size.

        Coordinates outside the grid and empty cells give an empty selection.
        Never changes the grid and does not check the game phase.
        """
        with self._lock:
            return self._evaluate_selection(row, col)

    def commit_pop(self) -> bool:
        """Pop the highlighted group if it is worth points; return whether it popped."""
        with self._lock:
            scores = self._scores
            if scores.selection_score <= 0:
                return False
            grid = self._grid
            highlight = self._highlight
            popped = highlight.positions()
            for row, col in popped:
                grid.cells[row][col] = EMPTY
            points = scores.selection_score
            scores.score += points
            logger.debug("Popped %d bubbles for %d points (score=%d)", len(popped), points, scores.score)
            moves = self._compact_columns()
            self._last_pop = PopResult(positions=tuple(popped), points=points, moves=tuple(moves))
            # Highlighted positions are stale after gravity.
            highlight.clear()
            scores.selection_score = 0
            self._settle_phase()
            if self._state.phase is GamePhase.TERMINAL:
                logger.debug("No legal move left, final score %d", scores.score)
            self._check_invariants()
            return True

    def compact_columns(self) -> List[GravityMove]:
        with self._lock:
            return self._compact_columns()

    def has_legal_move(self) -> bool:
        with self._lock:
            return self._has_legal_move()

    def load_grid(self, cells: Sequence[Sequence[int]]) -> None:
        """Install an explicit grid, e.g. a prepared puzzle or test fixture.

        The shape must match the engine and every value must be a valid color
        or 0. Scores and highlight reset; outside LOADING the phase follows
        has_legal_move.
        """
        rows = len(cells)
        if rows != self.rows or any(len(line) != self.cols for line in cells):
            raise ValueError(f"Expected a {self.rows}x{self.cols} grid")
        for line in cells:
            for value in line:
                if not 0 <= value <= self.color_count:
                    raise ValueError(f"Cell value {value} outside 0..{self.color_count}")
        with self._lock:
            grid = self._grid
            grid.cells = [list(line) for line in cells]
            self._highlight.clear()
            self._last_pop = None
            scores = self._scores
            scores.score = 0
            scores.selection_score = 0
            self._settle_phase()

    def highlighted_positions(self) -> List[Position]:
        with self._lock:
            return self._highlight.positions()

    def snapshot(self) -> GridSnapshot:
        with self._lock:
            scores = self._scores
            return GridSnapshot(
                cells=tuple(tuple(line) for line in self._grid.cells),
                highlight=tuple(tuple(line) for line in self._highlight.cells),
                score=scores.score,
                selection_score=scores.selection_score,
                phase=self._state.phase,
            )

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _fill_random(self) -> None:
        grid = self._grid
        grid.cells = grid_ops.random_cells(grid.rows, grid.cols, self.color_count, self._rng)
        self._highlight.clear()
        self._last_pop = None
        scores = self._scores
        scores.score = 0
        scores.selection_score = 0

    def _evaluate_selection(self, row: int, col: int) -> int:
        highlight = self._highlight
        highlight.clear()
        group = grid_ops.flood_fill(self._grid.cells, row, col)
        highlight.mark(group)
        self._scores.selection_score = grid_ops.selection_score(len(group))
        return len(group)

    def _compact_columns(self) -> List[GravityMove]:
        moves = grid_ops.compact_columns(self._grid.cells)
        if moves:
            logger.debug("Gravity moved %d bubbles", len(moves))
        return moves

    def _has_legal_move(self) -> bool:
        return grid_ops.has_legal_move(self._grid.cells)

    def _settle_phase(self) -> None:
        state = self._state
        if state.phase is GamePhase.LOADING:
            return
        state.phase = GamePhase.ACTIVE if self._has_legal_move() else GamePhase.TERMINAL

    def _check_invariants(self) -> None:
        if not __debug__:
            return
        cells = self._grid.cells
        assert all(0 <= value <= self.color_count for line in cells for value in line), "cell value out of range"
        assert grid_ops.is_compacted(cells), "bubble floating above an empty cell"
        phase = self._state.phase
        if phase is not GamePhase.LOADING:
            assert (phase is GamePhase.TERMINAL) == (not grid_ops.has_legal_move(cells)), "phase disagrees with board"
