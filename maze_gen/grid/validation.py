"""Structural checks for a finished maze grid."""

from __future__ import annotations

from typing import List

import numpy as np

from ..errors import GenerationInvariantViolation
from .builder import MazeGrid
from .connectivity import count_free_components, reachable_mask
from .tags import ENTRANCE_DOOR, EXIT_DOOR, Tag, find_cells, traversable_mask


def _check_door(tags: np.ndarray, row: int, tag: Tag, value: int, label: str) -> List[str]:
    problems: List[str] = []
    cells = find_cells(tags, tag)
    if len(cells) != 1:
        return [f"expected exactly one {label} cell, found {len(cells)}"]
    i, j = cells[0]
    if i != row:
        problems.append(f"{label} at row {i}, expected row {row}")
    if j % 2 != 1 or j in (0, tags.shape[1] - 1):
        problems.append(f"{label} at column {j} is not an odd, non-corner column")
    if int(tags[i, j]) != value:
        problems.append(f"{label} cell carries unexpected tags {int(tags[i, j])}")
    return problems


def validate_maze_grid(maze: MazeGrid) -> List[str]:
    """Return a list of invariant violations (empty when the grid is sound)."""
    tags = maze.tags
    H, W = tags.shape
    problems: List[str] = []

    if H % 2 != 1 or W % 2 != 1:
        problems.append(f"grid shape {H}x{W} is not odd in both axes")
    if (H, W) != (2 * maze.height + 1, 2 * maze.width + 1):
        problems.append(f"grid shape {H}x{W} does not match {maze.width}x{maze.height} rooms")

    wall = int(Tag.WALL)
    border = np.zeros((H, W), dtype=bool)
    border[0, :] = border[-1, :] = border[:, 0] = border[:, -1] = True
    door = (tags & int(Tag.DOOR)) != 0
    if np.any(border & ~door & ((tags & wall) == 0)):
        problems.append("perimeter has an opening that is not a door")
    if np.any(door & ~border):
        problems.append("door cell found inside the perimeter")
    if np.any((tags[::2, ::2] & wall) == 0):
        problems.append("wall lattice intersection was cleared")

    problems += _check_door(tags, H - 1, Tag.ENTRANCE, ENTRANCE_DOOR, "entrance")
    problems += _check_door(tags, 0, Tag.EXIT, EXIT_DOOR, "exit")

    keys = find_cells(tags, Tag.KEY)
    if len(keys) != 1:
        problems.append(f"expected exactly one key cell, found {len(keys)}")
    elif int(tags[keys[0]]) != int(Tag.KEY):
        problems.append("key cell carries other tags")

    blocked = ~traversable_mask(tags)
    if problems:
        return problems
    reach = reachable_mask(blocked, maze.entrance)
    unreached = int(np.count_nonzero(~blocked & ~reach))
    if unreached:
        problems.append(f"{unreached} open cells unreachable from the entrance")
    if count_free_components(blocked) != 1:
        problems.append("open space is split into several components")
    if not reach[maze.exit]:
        problems.append("exit unreachable from the entrance")
    if not reach[maze.key]:
        problems.append("key unreachable from the entrance")
    return problems


def assert_valid_maze_grid(maze: MazeGrid) -> None:
    problems = validate_maze_grid(maze)
    if problems:
        raise GenerationInvariantViolation("; ".join(problems))


__all__ = ["validate_maze_grid", "assert_valid_maze_grid"]
