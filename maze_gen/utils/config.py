"""Config loading helpers built around OmegaConf."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from omegaconf import OmegaConf

from ..config import MazeConfig
from ..projection.spatial import ProjectionConfig


def load_config_any(path: str) -> Any:
    """Load a YAML/OMEGACONF file and return the resolved Python object."""
    return OmegaConf.to_container(OmegaConf.load(path), resolve=True)


def load_config_dict(path: str) -> Dict[str, Any]:
    """Load a config file and guarantee a `dict` result."""
    cfg = load_config_any(path)
    if not isinstance(cfg, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(cfg)}")
    return cfg


def maze_config_from_dict(data: Dict[str, Any]) -> MazeConfig:
    """Build a MazeConfig from a plain mapping; unknown keys are rejected."""
    data = dict(data)
    proj = data.pop("projection", None) or {}
    if not isinstance(proj, dict):
        raise TypeError(f"Expected mapping for 'projection', got {type(proj)}")
    known = {"width", "height", "seed", "validate"}
    extra = set(data) - known
    if extra:
        raise TypeError(f"Unknown maze config keys: {sorted(extra)}")
    return MazeConfig(projection=ProjectionConfig(**proj), **data)


def load_maze_config(path: Optional[str] = None, overrides: Sequence[str] = ()) -> MazeConfig:
    """Load a maze config file and apply ``key=value`` dotlist overrides."""
    base = OmegaConf.load(path) if path else OmegaConf.create({})
    merged = OmegaConf.merge(base, OmegaConf.from_dotlist(list(overrides)))
    data = OmegaConf.to_container(merged, resolve=True)
    if not isinstance(data, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(data)}")
    return maze_config_from_dict(data)
