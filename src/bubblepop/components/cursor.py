from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """Last pointer position mapped onto the grid.

    row/col are always clamped into the grid; in_region is False when the pointer
    left the playable frame, in which case row/col keep their previous values.
    """
    row: int = 0
    col: int = 0
    in_region: bool = False
