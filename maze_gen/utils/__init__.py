"""Utility helpers shared across scripts and tooling."""

from .config import load_config_any, load_config_dict, load_maze_config, maze_config_from_dict

__all__ = [
    "load_config_any",
    "load_config_dict",
    "load_maze_config",
    "maze_config_from_dict",
]
