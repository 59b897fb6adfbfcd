"""Logical maze grid: construction, distances, checks."""

from .builder import GridBuilder, MazeGrid, Partition, build_maze_grid
from .flood import count_steps, find_key_location
from .render import grid_to_ascii
from .tags import Tag, is_traversable, tag_names
from .validation import assert_valid_maze_grid, validate_maze_grid

__all__ = [
    "GridBuilder",
    "MazeGrid",
    "Partition",
    "build_maze_grid",
    "count_steps",
    "find_key_location",
    "grid_to_ascii",
    "Tag",
    "is_traversable",
    "tag_names",
    "assert_valid_maze_grid",
    "validate_maze_grid",
]
