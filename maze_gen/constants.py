from __future__ import annotations

# World projection
CELL_UNIT: float = 4.0
WALL_HEIGHT: float = 5.0
CENTER_OFFSET_CELLS: int = 10

# Grid
MIN_ROOMS: int = 1

# Recursive division split windows as (numerator, denominator) of the candidate range
HORIZ_SPLIT_WINDOW: tuple[tuple[int, int], tuple[int, int]] = ((1, 4), (3, 4))
VERT_SPLIT_WINDOW: tuple[tuple[int, int], tuple[int, int]] = ((1, 3), (2, 3))

# Flood fill
UNREACHED: int = -1
