from __future__ import annotations

from collections import deque
from typing import Tuple

import numpy as np
from scipy.ndimage import label

_NEIGH_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))
_NEIGH_8 = _NEIGH_4 + ((1, 1), (1, -1), (-1, 1), (-1, -1))


def _neighbors(connectivity: int) -> Tuple[Tuple[int, int], ...]:
    if connectivity == 4:
        return _NEIGH_4
    if connectivity == 8:
        return _NEIGH_8
    raise ValueError("connectivity must be 4 or 8")


def reachable_mask(
    blocked: np.ndarray,
    start_ij: Tuple[int, int],
    connectivity: int = 4,
) -> np.ndarray:
    """Breadth-first mask of free (False) cells reachable from ``start_ij``.

    blocked: bool array with True for walls, False for free.
    """
    if blocked.ndim != 2:
        raise ValueError("grid must be 2D")
    neigh = _neighbors(connectivity)
    H, W = blocked.shape
    visited = np.zeros((H, W), dtype=bool)
    si, sj = start_ij
    if si < 0 or sj < 0 or si >= H or sj >= W or blocked[si, sj]:
        return visited

    q: deque[Tuple[int, int]] = deque()
    q.append((si, sj))
    visited[si, sj] = True
    while q:
        i, j = q.popleft()
        for di, dj in neigh:
            ni = i + di
            nj = j + dj
            if 0 <= ni < H and 0 <= nj < W and not blocked[ni, nj] and not visited[ni, nj]:
                visited[ni, nj] = True
                q.append((ni, nj))
    return visited


def cells_connected_free(
    blocked: np.ndarray,
    start_ij: Tuple[int, int],
    goal_ij: Tuple[int, int],
    connectivity: int = 4,
) -> bool:
    """Return True if start and goal are connected through free (False) cells."""
    H, W = blocked.shape
    gi, gj = goal_ij
    if gi < 0 or gj < 0 or gi >= H or gj >= W:
        return False
    return bool(reachable_mask(blocked, start_ij, connectivity)[gi, gj])


def count_free_components(blocked: np.ndarray, connectivity: int = 4) -> int:
    """Number of connected regions of free cells (scipy.ndimage.label)."""
    _neighbors(connectivity)
    if connectivity == 4:
        structure = np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]], dtype=bool)
    else:
        structure = np.ones((3, 3), dtype=bool)
    _, n = label(~blocked.astype(bool), structure=structure)
    return int(n)


__all__ = [
    "reachable_mask",
    "cells_connected_free",
    "count_free_components",
]
