"""Plain-text view of a maze grid for debugging and the CLI."""

from __future__ import annotations

import numpy as np

from .tags import Tag

# Checked in order; first match wins
_GLYPHS = (
    (Tag.WALL, "#"),
    (Tag.ENTRANCE, "E"),
    (Tag.EXIT, "X"),
    (Tag.KEY, "K"),
)


def cell_glyph(value: int) -> str:
    for tag, ch in _GLYPHS:
        if int(value) & int(tag):
            return ch
    return " "


def grid_to_ascii(tags: np.ndarray) -> str:
    """Render one character per cell, rows top to bottom."""
    return "\n".join("".join(cell_glyph(v) for v in row) for row in tags)


__all__ = ["cell_glyph", "grid_to_ascii"]
