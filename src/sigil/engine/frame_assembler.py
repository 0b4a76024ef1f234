"""
FrameAssembler - owns the output grid and publishes completed frames.

Render pass:
    assembler.begin(t_ms)          # zero the back buffer
    assembler.set_mirrored(...)    # any number of writes
    frame = assembler.commit(kind) # snapshot, notify listeners once

Only commit() exposes pixels. The back buffer is private, so a listener can
never observe a half-written grid. Frames are not queued: each commit
supersedes the previous `latest`.
"""

from __future__ import annotations
from typing import Callable, List, Optional

from sigil.models.color import Color
from sigil.models.enums import FrameKind, LogCategory
from sigil.models.frame import GridFrame, GRID_WIDTH, GRID_HEIGHT
from sigil.utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)

ReadyListener = Callable[[GridFrame], None]


class FrameAssembler:
    """
    Double-buffered 13×9 frame builder.

    Manages:
    - Back buffer (mutable, private)
    - Latest committed frame (immutable, public)
    - Frame-ready listeners (called exactly once per commit)
    """

    def __init__(self):
        self._buffer: List[List[Color]] = self._empty_buffer()
        self._in_pass = False
        self._t_ms = 0
        self._listeners: List[ReadyListener] = []

        self.latest: Optional[GridFrame] = None
        self.frames_committed = 0

    @staticmethod
    def _empty_buffer() -> List[List[Color]]:
        black = Color.black()
        return [[black] * GRID_WIDTH for _ in range(GRID_HEIGHT)]

    # ------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------

    def add_ready_listener(self, listener: ReadyListener) -> None:
        self._listeners.append(listener)

    def remove_ready_listener(self, listener: ReadyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------
    # Render pass
    # ------------------------------------------------------------

    @property
    def in_pass(self) -> bool:
        return self._in_pass

    def begin(self, t_ms: int) -> None:
        """Start a render pass: zero the back buffer"""
        self._buffer = self._empty_buffer()
        self._t_ms = t_ms
        self._in_pass = True

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not self._in_pass:
            raise RuntimeError("set_pixel() called outside a render pass")
        if not (0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT):
            raise IndexError(f"Pixel ({x}, {y}) outside {GRID_WIDTH}×{GRID_HEIGHT} grid")
        self._buffer[y][x] = color

    def set_mirrored(self, x: int, y: int, color: Color) -> None:
        """Write a quadrant cell to all four symmetric positions"""
        mx = GRID_WIDTH - 1 - x
        my = GRID_HEIGHT - 1 - y
        self.set_pixel(x, y, color)
        self.set_pixel(mx, y, color)
        self.set_pixel(x, my, color)
        self.set_pixel(mx, my, color)

    def commit(self, kind: FrameKind) -> GridFrame:
        """
        Finish the render pass and publish the frame.

        Returns:
            The new immutable GridFrame (also stored as `latest`)
        """
        if not self._in_pass:
            raise RuntimeError("commit() called without begin()")

        self.frames_committed += 1
        frame = GridFrame(
            pixels=tuple(tuple(row) for row in self._buffer),
            kind=kind,
            t_ms=self._t_ms,
            sequence=self.frames_committed,
        )
        self._in_pass = False
        self.latest = frame

        for listener in list(self._listeners):
            try:
                listener(frame)
            except Exception as e:
                log.error(
                    "Frame-ready listener failed",
                    listener=getattr(listener, "__name__", repr(listener)),
                    error=str(e),
                    error_type=type(e).__name__,
                )
        return frame
