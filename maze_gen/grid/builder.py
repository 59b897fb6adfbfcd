"""Logical maze grid construction by recursive division.

Grid convention: indices [row, col]; row 0 is the top (exit) edge and the last
row is the bottom (entrance) edge. Room ``k`` (1-based) sits at grid index
``2k-1``; wall line ``k`` sits at grid index ``2k``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import math

import numpy as np

from ..constants import HORIZ_SPLIT_WINDOW, MIN_ROOMS, VERT_SPLIT_WINDOW
from ..errors import GenerationInvariantViolation, InvalidDimension
from .flood import find_key_location
from .tags import ENTRANCE_DOOR, EXIT_DOOR, GRID_DTYPE, OPEN, Tag

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Partition:
    """A wall cross drawn by one division step.

    ``gaps`` is ordered (left, right, top, bottom) arm; ``carved`` holds the
    grid cell cleared on each open arm.
    """

    wall_row: int
    wall_col: int
    row_span: Tuple[int, int]
    col_span: Tuple[int, int]
    gaps: Tuple[bool, bool, bool, bool]
    carved: Tuple[Cell, ...]

    def arms(self) -> Tuple[List[Cell], List[Cell], List[Cell], List[Cell]]:
        """Grid cells of each arm, excluding the crossing cell."""
        r0, r1 = self.row_span
        c0, c1 = self.col_span
        left = [(self.wall_row, j) for j in range(c0, self.wall_col)]
        right = [(self.wall_row, j) for j in range(self.wall_col + 1, c1 + 1)]
        top = [(i, self.wall_col) for i in range(r0, self.wall_row)]
        bottom = [(i, self.wall_col) for i in range(self.wall_row + 1, r1 + 1)]
        return left, right, top, bottom


@dataclass
class MazeGrid:
    """Finished logical maze."""

    tags: np.ndarray
    width: int
    height: int
    entrance: Cell
    exit: Cell
    key: Cell
    partitions: List[Partition] = field(default_factory=list)

    @property
    def shape(self) -> Tuple[int, int]:
        return int(self.tags.shape[0]), int(self.tags.shape[1])


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def pos_to_space(k: int) -> int:
    """Room index (1-based) to grid index."""
    return 2 * (k - 1) + 1


def pos_to_wall(k: int) -> int:
    """Wall-line index to grid index."""
    return 2 * k


def _check_dimension(name: str, value: object) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidDimension(name, value)
    if int(value) < MIN_ROOMS:
        raise InvalidDimension(name, value)
    return int(value)


class GridBuilder:
    """Builds one maze grid from an explicit random generator."""

    def __init__(self, width: int, height: int, rng: Optional[np.random.Generator] = None) -> None:
        """Validate dimensions; nothing is allocated until :meth:`build`.

        Args:
            width: rooms per row (>= 1)
            height: rooms per column (>= 1)
            rng: NumPy random generator; a fresh unseeded one if omitted
        """
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", height)
        self.rows = 2 * self.height + 1
        self.cols = 2 * self.width + 1
        self.rng = rng if rng is not None else np.random.default_rng()
        self.grid: Optional[np.ndarray] = None
        self.partitions: List[Partition] = []

    def build(self) -> MazeGrid:
        """Seed walls, place doors, divide the interior and place the key."""
        self.grid = self._init_grid()
        self.partitions = []
        exit_ij = self._place_door(0, EXIT_DOOR)
        entrance_ij = self._place_door(self.rows - 1, ENTRANCE_DOOR)
        self.partition(1, self.height - 1, 1, self.width - 1)
        key_ij = find_key_location(self.grid, entrance_ij, exit_ij)
        self.grid[key_ij] = int(Tag.KEY)
        logger.debug(
            "Built %dx%d maze grid: %d partitions, entrance=%s exit=%s key=%s",
            self.width,
            self.height,
            len(self.partitions),
            entrance_ij,
            exit_ij,
            key_ij,
        )
        return MazeGrid(
            tags=self.grid,
            width=self.width,
            height=self.height,
            entrance=entrance_ij,
            exit=exit_ij,
            key=key_ij,
            partitions=list(self.partitions),
        )

    def _init_grid(self) -> np.ndarray:
        """Outer border plus a wall at every (even, even) intersection."""
        grid = np.full((self.rows, self.cols), OPEN, dtype=GRID_DTYPE)
        grid[0, :] = int(Tag.WALL)
        grid[-1, :] = int(Tag.WALL)
        grid[:, 0] = int(Tag.WALL)
        grid[:, -1] = int(Tag.WALL)
        grid[::2, ::2] = int(Tag.WALL)
        return grid

    def _place_door(self, row: int, value: int) -> Cell:
        col = pos_to_space(self._rand(1, self.width))
        self.grid[row, col] = value
        return row, col

    def _rand(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi]; ``lo`` when the range is empty."""
        if hi <= lo:
            return lo
        return int(self.rng.integers(lo, hi, endpoint=True))

    def _pick_split(self, a: int, b: int, window: Tuple[Tuple[int, int], Tuple[int, int]]) -> int:
        """Split line for [a, b], drawn from the middle window of [a+1, b-1]."""
        if a == b:
            return a
        x = a + 1
        y = b - 1
        (n0, d0), (n1, d1) = window
        start = _round_half_up(x + (y - x) * n0 / d0)
        end = _round_half_up(x + (y - x) * n1 / d1)
        return self._rand(start, end)

    def partition(self, r1: int, r2: int, c1: int, c2: int) -> None:
        """Divide the wall-line region [r1, r2] x [c1, c2] with one cross.

        Args:
            r1, r2: first/last horizontal wall line of the region
            c1, c2: first/last vertical wall line of the region
        """
        if r2 < r1 or c2 < c1:
            return

        i0, i1 = pos_to_wall(r1) - 1, pos_to_wall(r2) + 1
        j0, j1 = pos_to_wall(c1) - 1, pos_to_wall(c2) + 1
        if i0 < 1 or j0 < 1 or i1 > self.rows - 2 or j1 > self.cols - 2:
            raise GenerationInvariantViolation(
                f"partition region rows {i0}..{i1} cols {j0}..{j1} "
                f"outside interior of {self.rows}x{self.cols} grid"
            )

        horiz = self._pick_split(r1, r2, HORIZ_SPLIT_WINDOW)
        vert = self._pick_split(c1, c2, VERT_SPLIT_WINDOW)
        wall_row = pos_to_wall(horiz)
        wall_col = pos_to_wall(vert)

        self.grid[wall_row, j0 : j1 + 1] = int(Tag.WALL)
        self.grid[i0 : i1 + 1, wall_col] = int(Tag.WALL)

        gaps = tuple(bool(g) for g in self.rng.permutation([True, True, True, False]))
        carved: List[Cell] = []
        if gaps[0]:
            carved.append((wall_row, pos_to_space(self._rand(c1, vert))))
        if gaps[1]:
            carved.append((wall_row, pos_to_space(self._rand(vert + 1, c2 + 1))))
        if gaps[2]:
            carved.append((pos_to_space(self._rand(r1, horiz)), wall_col))
        if gaps[3]:
            carved.append((pos_to_space(self._rand(horiz + 1, r2 + 1)), wall_col))
        for cell in carved:
            self.grid[cell] = OPEN

        self.partitions.append(
            Partition(
                wall_row=wall_row,
                wall_col=wall_col,
                row_span=(i0, i1),
                col_span=(j0, j1),
                gaps=gaps,
                carved=tuple(carved),
            )
        )

        self.partition(r1, horiz - 1, c1, vert - 1)
        self.partition(horiz + 1, r2, c1, vert - 1)
        self.partition(r1, horiz - 1, vert + 1, c2)
        self.partition(horiz + 1, r2, vert + 1, c2)


def build_maze_grid(
    width: int,
    height: int,
    rng: Optional[np.random.Generator] = None,
) -> MazeGrid:
    """Build a finished maze grid of ``width`` x ``height`` rooms."""
    return GridBuilder(width, height, rng or np.random.default_rng()).build()


__all__ = [
    "Partition",
    "MazeGrid",
    "GridBuilder",
    "build_maze_grid",
    "pos_to_space",
    "pos_to_wall",
]
