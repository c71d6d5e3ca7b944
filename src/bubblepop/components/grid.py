from dataclasses import dataclass, field
from typing import List

from bubblepop.constants import EMPTY


@dataclass(slots=True)
class Grid:
    """Playing field of color ids; 0 is an empty cell, row 0 is the top row."""
    rows: int
    cols: int
    cells: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[EMPTY] * self.cols for _ in range(self.rows)]
