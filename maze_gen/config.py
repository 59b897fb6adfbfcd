from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .projection.spatial import ProjectionConfig


@dataclass
class MazeConfig:
    """Size, seed and projection settings for one generation request.

    width/height are checked by the builder so that bad sizes raise
    ``InvalidDimension`` rather than an assertion.
    """

    width: int = 10
    height: int = 10
    seed: Optional[int] = None
    validate: bool = False
    projection: ProjectionConfig = field(default_factory=ProjectionConfig)
