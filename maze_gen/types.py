from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

Coordinate3 = Tuple[float, float, float]


@dataclass(frozen=True)
class SpatialRecord:
    """One axis-aligned wall block: size and world position of its base."""

    dimension: Coordinate3
    position: Coordinate3

    def to_dict(self) -> Dict[str, Any]:
        return {"dimension": list(self.dimension), "position": list(self.position)}


@dataclass(frozen=True)
class MazeResult:
    """
    Renderer-facing output of a generation request.

    - walls: one block per wall cell, in row-major grid order
    - entrance / exit: world coordinates of the two doors (see projection notes)
    - key: world coordinate of the key cell if one was placed
    """

    walls: Tuple[SpatialRecord, ...]
    entrance: Coordinate3
    exit: Coordinate3
    key: Optional[Coordinate3] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "maze": [w.to_dict() for w in self.walls],
            "entrance": list(self.entrance),
            "exit": list(self.exit),
            "key": list(self.key) if self.key is not None else None,
        }
