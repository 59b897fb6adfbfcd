"""Step-distance flood fill and key placement."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..constants import UNREACHED
from ..errors import GenerationInvariantViolation
from .tags import OPEN, Tag, traversable_mask

# North, east, south, west
NEIGHBOR_ORDER: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def count_steps(tags: np.ndarray, origin: Tuple[int, int], stop: Tag) -> np.ndarray:
    """Label cells with their step count from ``origin``.

    Depth-first, neighbors visited north, east, south, west. A cell is skipped
    when it is out of bounds, already holds a value <= the candidate, or is a
    wall. A cell carrying ``stop`` is labeled but not expanded.

    The explicit stack checks each entry when popped, which reproduces the
    order of the equivalent recursive fill.

    Returns:
        int32 array shaped like ``tags``; unreached cells hold ``UNREACHED``.
    """
    H, W = tags.shape
    steps = np.full((H, W), UNREACHED, dtype=np.int32)
    free = traversable_mask(tags)
    stop_bit = int(stop)

    stack = [(int(origin[0]), int(origin[1]), 0)]
    while stack:
        i, j, val = stack.pop()
        if i < 0 or j < 0 or i >= H or j >= W:
            continue
        current = steps[i, j]
        if current != UNREACHED and current <= val:
            continue
        if not free[i, j]:
            continue
        steps[i, j] = val
        if int(tags[i, j]) & stop_bit:
            continue
        for di, dj in reversed(NEIGHBOR_ORDER):
            stack.append((i + di, j + dj, val + 1))
    return steps


def find_key_location(
    tags: np.ndarray,
    entrance_ij: Tuple[int, int],
    exit_ij: Tuple[int, int],
) -> Tuple[int, int]:
    """Open cell maximizing distance-from-entrance + distance-from-exit.

    Only cells reached by both fills and carrying no tags qualify. Ties go to
    the first cell in row-major order.
    """
    from_entrance = count_steps(tags, entrance_ij, Tag.EXIT)
    from_exit = count_steps(tags, exit_ij, Tag.ENTRANCE)

    candidates = (from_entrance != UNREACHED) & (from_exit != UNREACHED) & (tags == OPEN)
    if not np.any(candidates):
        raise GenerationInvariantViolation("key placement found no cell reached from both doors")

    total = np.where(candidates, from_entrance.astype(np.int64) + from_exit, -1)
    flat = int(np.argmax(total))
    i, j = divmod(flat, tags.shape[1])
    return int(i), int(j)


__all__ = ["NEIGHBOR_ORDER", "count_steps", "find_key_location"]
