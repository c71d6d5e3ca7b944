from dataclasses import dataclass, field
from typing import Iterable, List, Tuple


@dataclass(slots=True)
class HighlightMap:
    """Marks the cells of the connected group currently under examination."""
    rows: int
    cols: int
    cells: List[List[bool]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[False] * self.cols for _ in range(self.rows)]

    def clear(self) -> None:
        for line in self.cells:
            for col in range(len(line)):
                line[col] = False

    def mark(self, positions: Iterable[Tuple[int, int]]) -> None:
        for row, col in positions:
            self.cells[row][col] = True

    def positions(self) -> List[Tuple[int, int]]:
        return [
            (row, col)
            for row, line in enumerate(self.cells)
            for col, lit in enumerate(line)
            if lit
        ]
