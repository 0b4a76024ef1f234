# hardware/display/grid_pixel_mapper.py
"""
GridPixelMapper
===============
Maps grid (x, y) → physical LED index on a single daisy-chained strip.

Handles:
- row-major wiring (every row starts on the left)
- serpentine wiring (odd rows run right-to-left)
- flip_x for matrices mounted the other way round
"""

from __future__ import annotations
from typing import List

from sigil.models.frame import GridFrame, GRID_WIDTH, GRID_HEIGHT


class GridPixelMapper:
    """
    Grid → strip index mapper.

    Usage:
        mapper = GridPixelMapper(serpentine=True)
        index = mapper.index(3, 1)          # 22 on a 13-wide serpentine panel
        pixels = mapper.flatten(frame)      # List[Color] in strip order
    """

    def __init__(self, serpentine: bool = True, flip_x: bool = False) -> None:
        self.serpentine = serpentine
        self.flip_x = flip_x
        self.led_count = GRID_WIDTH * GRID_HEIGHT

        # Precomputed lookup: physical index for every grid cell
        self._lookup: List[List[int]] = [
            [self._compute_index(x, y) for x in range(GRID_WIDTH)]
            for y in range(GRID_HEIGHT)
        ]

    def _compute_index(self, x: int, y: int) -> int:
        col = GRID_WIDTH - 1 - x if self.flip_x else x
        if self.serpentine and y % 2 == 1:
            col = GRID_WIDTH - 1 - col
        return y * GRID_WIDTH + col

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT):
            raise IndexError(f"Pixel ({x}, {y}) outside {GRID_WIDTH}×{GRID_HEIGHT} grid")
        return self._lookup[y][x]

    def flatten(self, frame: GridFrame) -> list:
        """Frame pixels reordered into physical strip order"""
        pixels = [None] * self.led_count
        for y, row in enumerate(frame.rows()):
            for x, color in enumerate(row):
                pixels[self._lookup[y][x]] = color
        return pixels
