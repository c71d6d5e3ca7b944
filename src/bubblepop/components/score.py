from dataclasses import dataclass


@dataclass(slots=True)
class ScoreBoard:
    """Total points of the running game and the value of the current selection."""
    score: int = 0
    selection_score: int = 0
