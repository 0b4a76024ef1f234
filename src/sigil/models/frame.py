"""
Frame model - one fully assembled 13×9 grid

GridFrame is what the FrameAssembler hands to the presentation boundary.
It is immutable: sinks may keep a reference without copying.
"""

import time
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from sigil.models.color import Color
from sigil.models.enums import FrameKind

GRID_WIDTH = 13
GRID_HEIGHT = 9
CENTER_X = GRID_WIDTH // 2    # 6
CENTER_Y = GRID_HEIGHT // 2   # 4

Row = Tuple[Color, ...]


def blank_rows() -> Tuple[Row, ...]:
    black = Color.black()
    return tuple(tuple(black for _ in range(GRID_WIDTH)) for _ in range(GRID_HEIGHT))


@dataclass(frozen=True)
class GridFrame:
    """
    Dense 13×9 color grid

    pixels[y][x], x = column 0..12, y = row 0..8. The wall-clock
    timestamp is not part of equality.
    """

    pixels: Tuple[Row, ...] = field(default_factory=blank_rows)
    kind: FrameKind = FrameKind.BLANK
    t_ms: int = 0
    sequence: int = 0
    timestamp: float = field(default_factory=time.time, compare=False)

    def __post_init__(self):
        if len(self.pixels) != GRID_HEIGHT or any(len(row) != GRID_WIDTH for row in self.pixels):
            raise ValueError(f"GridFrame must be {GRID_WIDTH}×{GRID_HEIGHT}")

    def get(self, x: int, y: int) -> Color:
        if not (0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT):
            raise IndexError(f"Pixel ({x}, {y}) outside {GRID_WIDTH}×{GRID_HEIGHT} grid")
        return self.pixels[y][x]

    def rows(self) -> Iterator[Row]:
        return iter(self.pixels)

    def to_packed_rows(self) -> List[List[int]]:
        """Grid as 0xRRGGBB integers, row-major (handy for golden comparisons)"""
        return [[c.to_packed() for c in row] for row in self.pixels]

    def is_blank(self) -> bool:
        return all(c.is_black() for row in self.pixels for c in row)

    def is_symmetric(self) -> bool:
        """True if the grid mirrors exactly about the center column and row"""
        for y in range(GRID_HEIGHT):
            for x in range(GRID_WIDTH):
                c = self.pixels[y][x]
                if c != self.pixels[y][GRID_WIDTH - 1 - x] or c != self.pixels[GRID_HEIGHT - 1 - y][x]:
                    return False
        return True

    def count_lit(self) -> int:
        return sum(1 for row in self.pixels for c in row if not c.is_black())
