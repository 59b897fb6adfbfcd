"""Exceptions raised by maze generation."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for maze generation errors."""


class InvalidDimension(MazeError, ValueError):
    """Requested width/height cannot produce a maze with non-corner doors."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__(f"{name} must be an integer >= 1, got {value!r}")
        self.name = name
        self.value = value


class GenerationInvariantViolation(MazeError, RuntimeError):
    """Internal logic error during generation; the grid must not be used."""


__all__ = ["MazeError", "InvalidDimension", "GenerationInvariantViolation"]
