from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float
EVENT_ASSETS_READY = "assets_ready"        # payload: None


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_MOVE = "mouse_move"            # payload: x, y, dx, dy
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_CURSOR_MOVED = "cursor_moved"        # payload: row, col
EVENT_CURSOR_LEFT = "cursor_left"          # payload: None
EVENT_CELL_CLICK = "cell_click"            # payload: row, col
EVENT_NEW_GAME_REQUEST = "new_game_request"  # payload: None


# ============================================================================
# GRID MECHANICS
# ============================================================================
EVENT_SELECTION_CHANGED = "selection_changed"  # payload: positions=[(r,c),...], size=int, selection_score=int
EVENT_BUBBLES_POPPED = "bubbles_popped"        # payload: positions=[(r,c),...], points=int, score=int
EVENT_GRAVITY_APPLIED = "gravity_applied"      # payload: moves=list[GravityMove]


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_NEW_GAME_STARTED = "new_game_started"    # payload: None
EVENT_PHASE_CHANGED = "phase_changed"          # payload: previous_phase=GamePhase, new_phase=GamePhase
EVENT_GAME_OVER = "game_over"                  # payload: score=int
