"""
Error marker frame

A fixed red "X" shown while the identifier reader reports failures. Uses
only the FrameAssembler: palette and geometry are left untouched.
"""

from sigil.engine.frame_assembler import FrameAssembler
from sigil.models.color import Color
from sigil.models.enums import FrameKind
from sigil.models.frame import GridFrame, GRID_WIDTH, GRID_HEIGHT

ERROR_COLOR = Color.red()

# The X spans the centered square, leaving the outer columns dark
_X_MARGIN = (GRID_WIDTH - GRID_HEIGHT) // 2   # 2


def error_marker_pixels():
    """Grid coordinates covered by the X (both diagonals of the centered square)"""
    for y in range(GRID_HEIGHT):
        yield (_X_MARGIN + y, y)
        yield (GRID_WIDTH - 1 - _X_MARGIN - y, y)


def render_error_frame(assembler: FrameAssembler, t_ms: int = 0, color: Color = ERROR_COLOR) -> GridFrame:
    """Run a full render pass that draws only the error marker"""
    assembler.begin(t_ms)
    for x, y in error_marker_pixels():
        assembler.set_pixel(x, y, color)
    return assembler.commit(FrameKind.ERROR)
