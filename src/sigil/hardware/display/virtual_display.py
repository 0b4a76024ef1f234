from __future__ import annotations
from typing import Optional

from sigil.hardware.display.display_interface import IGridDisplay
from sigil.models.frame import GridFrame


class VirtualGridDisplay(IGridDisplay):
    """In-memory display: keeps the last frame (PC runs and tests)"""

    def __init__(self):
        self.frame: Optional[GridFrame] = None
        self.present_count = 0

    def present(self, frame: GridFrame) -> None:
        self.frame = frame
        self.present_count += 1

    def clear(self) -> None:
        self.frame = None
