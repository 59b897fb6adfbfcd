"""Public generation entry points."""

from __future__ import annotations

from typing import Optional, Union
import logging

import numpy as np

from .config import MazeConfig
from .grid.builder import MazeGrid, build_maze_grid
from .grid.validation import assert_valid_maze_grid
from .projection.spatial import ProjectionConfig, project_grid
from .types import MazeResult

logger = logging.getLogger(__name__)

RNGSeed = Union[None, int, np.random.SeedSequence, np.random.Generator]


def make_rng(seed: RNGSeed = None) -> np.random.Generator:
    """Per-call generator; an existing Generator is used as-is."""
    return np.random.default_rng(seed)


def generate_grid(width: int, height: int, seed: RNGSeed = None, validate: bool = False) -> MazeGrid:
    maze = build_maze_grid(width, height, make_rng(seed))
    if validate:
        assert_valid_maze_grid(maze)
    return maze


def generate(
    width: int,
    height: int,
    seed: RNGSeed = None,
    projection: Optional[ProjectionConfig] = None,
    validate: bool = False,
) -> MazeResult:
    """Generate a maze and project it into world blocks.

    Args:
        width: rooms per row (>= 1)
        height: rooms per column (>= 1)
        seed: int / SeedSequence / Generator for reproducible output, None for fresh entropy
        projection: world scale and offset; defaults to unit=4, wall_height=5, offset=10
        validate: re-check all grid invariants before projecting

    Raises:
        InvalidDimension: width or height below 1
        GenerationInvariantViolation: internal generation defect
    """
    maze = generate_grid(width, height, seed, validate=validate)
    result = project_grid(maze, projection)
    logger.debug(
        "Generated %dx%d maze: %d wall blocks, entrance=%s exit=%s",
        maze.width,
        maze.height,
        len(result.walls),
        result.entrance,
        result.exit,
    )
    return result


def generate_from_config(cfg: MazeConfig) -> MazeResult:
    return generate(
        cfg.width,
        cfg.height,
        seed=cfg.seed,
        projection=cfg.projection,
        validate=cfg.validate,
    )


__all__ = ["RNGSeed", "make_rng", "generate_grid", "generate", "generate_from_config"]
