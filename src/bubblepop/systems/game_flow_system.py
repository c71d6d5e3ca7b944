"""Drives the grid engine from input events and announces the results."""
from __future__ import annotations

import logging
from typing import List

from esper import World

from bubblepop.components.game_state import GamePhase
from bubblepop.events.bus import (
    EVENT_ASSETS_READY,
    EVENT_BUBBLES_POPPED,
    EVENT_CELL_CLICK,
    EVENT_CURSOR_MOVED,
    EVENT_GAME_OVER,
    EVENT_GRAVITY_APPLIED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_NEW_GAME_STARTED,
    EVENT_PHASE_CHANGED,
    EVENT_SELECTION_CHANGED,
    EVENT_TICK,
    EventBus,
)
from bubblepop.systems.grid_engine import GridEngine
from bubblepop.systems.grid_ops import Position
from bubblepop.world import get_cursor

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Owns the phase transitions the engine leaves to its host."""

    def __init__(self, world: World, event_bus: EventBus, engine: GridEngine) -> None:
        self.world = world
        self.event_bus = event_bus
        self.engine = engine
        self._last_selection: List[Position] = []

        self.event_bus.subscribe(EVENT_ASSETS_READY, self._on_assets_ready)
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)
        self.event_bus.subscribe(EVENT_CURSOR_MOVED, self._on_cursor_moved)
        self.event_bus.subscribe(EVENT_CELL_CLICK, self._on_cell_click)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self._on_new_game_request)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_assets_ready(self, sender, **payload) -> None:
        previous = self.engine.phase
        if self.engine.mark_ready():
            self._emit_phase_change(previous)

    def _on_tick(self, sender, **payload) -> None:
        if self.engine.phase is not GamePhase.ACTIVE:
            return
        # The cursor keeps its last cell while the pointer is outside the playground.
        cursor = get_cursor(self.world)
        self._select(cursor.row, cursor.col)

    def _on_cursor_moved(self, sender, **payload) -> None:
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        if self.engine.phase is not GamePhase.ACTIVE:
            return
        self._select(row, col)

    def _on_cell_click(self, sender, **payload) -> None:
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        if self.engine.phase is not GamePhase.ACTIVE:
            return
        self._select(row, col)
        if not self.engine.commit_pop():
            return
        result = self.engine.last_pop
        self._last_selection = []
        self.event_bus.emit(
            EVENT_BUBBLES_POPPED,
            positions=list(result.positions),
            points=result.points,
            score=self.engine.score,
        )
        if result.moves:
            self.event_bus.emit(EVENT_GRAVITY_APPLIED, moves=list(result.moves))
        if self.engine.phase is GamePhase.TERMINAL:
            logger.info("Game over with score %d", self.engine.score)
            self.event_bus.emit(EVENT_GAME_OVER, score=self.engine.score)
            self._emit_phase_change(GamePhase.ACTIVE)
        else:
            # Re-highlight whatever fell under the cursor.
            self._select(row, col)

    def _on_new_game_request(self, sender, **payload) -> None:
        previous = self.engine.phase
        if previous is GamePhase.LOADING:
            return
        self.engine.new_game()
        self._last_selection = []
        self.event_bus.emit(EVENT_NEW_GAME_STARTED)
        if self.engine.phase is not previous:
            self._emit_phase_change(previous)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _select(self, row: int, col: int) -> None:
        size = self.engine.evaluate_selection(row, col)
        positions = self.engine.highlighted_positions()
        if positions == self._last_selection:
            return
        self._last_selection = positions
        self.event_bus.emit(
            EVENT_SELECTION_CHANGED,
            positions=positions,
            size=size,
            selection_score=self.engine.selection_score,
        )

    def _emit_phase_change(self, previous: GamePhase) -> None:
        logger.debug("Phase %s -> %s", previous.name, self.engine.phase.name)
        self.event_bus.emit(
            EVENT_PHASE_CHANGED,
            previous_phase=previous,
            new_phase=self.engine.phase,
        )
