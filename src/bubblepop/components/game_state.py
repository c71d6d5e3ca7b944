"""Game phase resource owned by the grid engine."""
from dataclasses import dataclass
from enum import Enum, auto


class GamePhase(Enum):
    """LOADING until assets are ready, ACTIVE while moves remain, then TERMINAL."""
    LOADING = auto()
    ACTIVE = auto()
    TERMINAL = auto()


@dataclass
class GameState:
    """Singleton component storing the current game phase."""
    phase: GamePhase = GamePhase.LOADING
