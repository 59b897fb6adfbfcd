"""Project a finished maze grid into renderer-agnostic world blocks.

World convention: x follows grid rows, z follows grid columns, y is up. Block
positions are the cell index minus a fixed centering offset, times ``unit``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np

from ..constants import CELL_UNIT, CENTER_OFFSET_CELLS, WALL_HEIGHT
from ..grid.builder import MazeGrid
from ..grid.tags import Tag
from ..types import Coordinate3, MazeResult, SpatialRecord


@dataclass(frozen=True)
class ProjectionConfig:
    unit: float = CELL_UNIT
    wall_height: float = WALL_HEIGHT
    offset: int = CENTER_OFFSET_CELLS

    def __post_init__(self) -> None:
        assert self.unit > 0.0, "unit must be > 0"
        assert self.wall_height > 0.0, "wall_height must be > 0"


def cell_to_world(i: int, j: int, cfg: ProjectionConfig) -> Coordinate3:
    return (
        float((i - cfg.offset) * cfg.unit),
        0.0,
        float((j - cfg.offset) * cfg.unit),
    )


def project_grid(
    maze: Union[MazeGrid, np.ndarray],
    cfg: Optional[ProjectionConfig] = None,
) -> MazeResult:
    """Walk the grid once in row-major order and emit wall blocks.

    The door coordinates are returned swapped relative to their tags: the
    ``EXIT`` cell becomes ``entrance`` and the ``ENTRANCE`` cell becomes
    ``exit``. Consumers depend on this convention.
    """
    c = cfg or ProjectionConfig()
    tags = maze.tags if isinstance(maze, MazeGrid) else maze
    dimension = (float(c.unit), float(c.wall_height), float(c.unit))

    walls: List[SpatialRecord] = []
    entrance: Coordinate3 = (0.0, 0.0, 0.0)
    exit_: Coordinate3 = (0.0, 0.0, 0.0)
    key: Optional[Coordinate3] = None

    H, W = tags.shape
    for i in range(H):
        for j in range(W):
            v = int(tags[i, j])
            if v & Tag.WALL:
                walls.append(SpatialRecord(dimension=dimension, position=cell_to_world(i, j, c)))
            elif v & Tag.EXIT:
                entrance = cell_to_world(i, j, c)
            elif v & Tag.ENTRANCE:
                exit_ = cell_to_world(i, j, c)
            elif v & Tag.KEY:
                key = cell_to_world(i, j, c)

    return MazeResult(walls=tuple(walls), entrance=entrance, exit=exit_, key=key)


__all__ = ["ProjectionConfig", "cell_to_world", "project_grid"]
