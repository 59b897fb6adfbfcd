"""Cell tag bitset and helpers.

Each grid cell is a ``uint8`` holding a combination of :class:`Tag` flags;
zero means an open passage.
"""

from __future__ import annotations

from enum import IntFlag
from typing import FrozenSet

import numpy as np

GRID_DTYPE = np.uint8


class Tag(IntFlag):
    WALL = 1
    DOOR = 2
    ENTRANCE = 4
    EXIT = 8
    KEY = 16


OPEN = 0
ENTRANCE_DOOR = int(Tag.DOOR | Tag.ENTRANCE)
EXIT_DOOR = int(Tag.DOOR | Tag.EXIT)


def is_traversable(value: int) -> bool:
    """Walls block; doors, keys and open cells do not."""
    return not (int(value) & int(Tag.WALL))


def traversable_mask(tags: np.ndarray) -> np.ndarray:
    """Vectorized :func:`is_traversable` over a whole grid."""
    return (tags & int(Tag.WALL)) == 0


def tag_names(value: int) -> FrozenSet[str]:
    """Return the lowercase tag names set in ``value``."""
    return frozenset(t.name.lower() for t in Tag if int(value) & int(t))


def find_cells(tags: np.ndarray, tag: Tag) -> list[tuple[int, int]]:
    """Row-major list of (row, col) indices carrying ``tag``."""
    ii, jj = np.nonzero(tags & int(tag))
    return [(int(i), int(j)) for i, j in zip(ii, jj)]


__all__ = [
    "GRID_DTYPE",
    "Tag",
    "OPEN",
    "ENTRANCE_DOOR",
    "EXIT_DOOR",
    "is_traversable",
    "traversable_mask",
    "tag_names",
    "find_cells",
]
