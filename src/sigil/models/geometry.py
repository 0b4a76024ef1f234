"""
GeometryCache model - static per-identifier distance field

Holds one quadrant (columns 0..6, rows 0..4) of the 13×9 grid; the other
three quadrants are mirror images and are never stored.
"""

from dataclasses import dataclass
from typing import Tuple

from sigil.models.enums import ShapeMode
from sigil.models.frame import CENTER_X, CENTER_Y

QUADRANT_WIDTH = CENTER_X + 1    # 7
QUADRANT_HEIGHT = CENTER_Y + 1   # 5


@dataclass
class GeometryCache:
    """
    Cached time-independent geometry for one identifier

    distances[y][x] is the raw (unclamped) distance of quadrant cell (x, y).
    The raw identifier bytes 3..6 are kept verbatim because the animator
    needs them on every frame.

    Valid only while dirty is False.
    """

    distances: Tuple[Tuple[float, ...], ...]
    shape_mode: ShapeMode
    ring_size_modifier: float
    shape_byte: int
    style_byte: int
    sparsity_byte: int
    seed_byte: int
    dirty: bool = True

    def distance(self, x: int, y: int) -> float:
        if not (0 <= x < QUADRANT_WIDTH and 0 <= y < QUADRANT_HEIGHT):
            raise IndexError(f"Cell ({x}, {y}) outside {QUADRANT_WIDTH}×{QUADRANT_HEIGHT} quadrant")
        return self.distances[y][x]

    def invalidate(self) -> None:
        self.dirty = True
