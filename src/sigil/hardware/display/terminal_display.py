"""
TerminalGridDisplay - ANSI truecolor preview of the grid
=========================================================
Draws each pixel as two background-colored spaces and redraws in place,
so a desktop run shows the same animation as the LED matrix.
"""

from __future__ import annotations
import sys
from typing import Optional, TextIO

from sigil.hardware.display.display_interface import IGridDisplay
from sigil.models.frame import GridFrame, GRID_HEIGHT
from sigil.utils.logger import Colors

CURSOR_UP = '\033[{n}A'


class TerminalGridDisplay(IGridDisplay):

    def __init__(self, stream: Optional[TextIO] = None, in_place: bool = True):
        self.stream = stream or sys.stdout
        self.in_place = in_place
        self._drawn = False

    @staticmethod
    def render_text(frame: GridFrame) -> str:
        lines = []
        for row in frame.rows():
            cells = []
            for c in row:
                if c.is_black():
                    cells.append("  ")
                else:
                    cells.append(f"{Colors.background(c.r, c.g, c.b)}  {Colors.RESET}")
            lines.append("".join(cells))
        return "\n".join(lines)

    def present(self, frame: GridFrame) -> None:
        if self.in_place and self._drawn:
            self.stream.write(CURSOR_UP.format(n=GRID_HEIGHT))
            self.stream.write("\r")
        self.stream.write(self.render_text(frame) + "\n")
        self.stream.flush()
        self._drawn = True

    def clear(self) -> None:
        self.present(GridFrame())
