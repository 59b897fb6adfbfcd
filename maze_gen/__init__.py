"""Recursive-division maze generation with world-space block projection."""

from .config import MazeConfig
from .errors import GenerationInvariantViolation, InvalidDimension, MazeError
from .generate import generate, generate_from_config, generate_grid
from .grid.builder import MazeGrid, build_maze_grid
from .projection.spatial import ProjectionConfig, project_grid
from .types import Coordinate3, MazeResult, SpatialRecord

__all__ = [
    "MazeConfig",
    "ProjectionConfig",
    "MazeError",
    "InvalidDimension",
    "GenerationInvariantViolation",
    "generate",
    "generate_from_config",
    "generate_grid",
    "MazeGrid",
    "build_maze_grid",
    "project_grid",
    "Coordinate3",
    "MazeResult",
    "SpatialRecord",
]
