from dataclasses import dataclass
from typing import Tuple

from bubblepop.constants import NEW_GAME_BUTTON_FRAME


@dataclass(slots=True)
class NewGameButton:
    """Hit frame of the "New Game" button in canvas coordinates and its hover state."""
    frame: Tuple[float, float, float, float] = NEW_GAME_BUTTON_FRAME
    hovered: bool = False
