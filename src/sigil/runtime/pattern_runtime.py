"""
PatternRuntime - the cooperative render loop.

One tick:
  1. poll the identifier source (when its poll interval elapsed)
  2. apply the read to the engine (may mark geometry stale)
  3. render exactly one frame at the clock's current ms
  4. the frame-ready signal hands it to the display, once

Everything runs in a single asyncio task, so identifier arrival and
rendering never interleave.
"""

from __future__ import annotations
import asyncio
import time
from typing import Optional

from sigil.engine.pattern_engine import PatternEngine
from sigil.hardware.display.display_interface import IGridDisplay
from sigil.hardware.reader.reader_interface import IIdentifierSource
from sigil.models.enums import LogCategory
from sigil.models.frame import GridFrame
from sigil.runtime.clock import IClock, MonotonicClock
from sigil.utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)


class PatternRuntime:
    """
    Drives PatternEngine from a clock, an identifier source and a display.

    Manages:
    - Source polling cadence
    - Frame rate control
    - Presentation (via the assembler's frame-ready signal)
    - Basic counters for diagnostics
    """

    def __init__(
        self,
        engine: PatternEngine,
        source: IIdentifierSource,
        display: IGridDisplay,
        clock: Optional[IClock] = None,
        fps: int = 60,
        poll_interval_ms: int = 250,
    ):
        self.engine = engine
        self.source = source
        self.display = display
        self.clock = clock or MonotonicClock()
        self.fps = max(1, min(fps, 240))
        self.poll_interval_ms = poll_interval_ms

        self.running = False
        self.ticks = 0
        self.frames_presented = 0
        self.present_errors = 0
        self._last_poll_ms: Optional[int] = None

        self.engine.assembler.add_ready_listener(self._present)

    # ------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------

    def _present(self, frame: GridFrame) -> None:
        try:
            self.display.present(frame)
            self.frames_presented += 1
        except Exception as e:
            # Keep ticking: the next frame supersedes this one
            self.present_errors += 1
            log.error("Display present failed", error=str(e), error_type=type(e).__name__)

    # ------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------

    def _poll_due(self, now_ms: int) -> bool:
        return self._last_poll_ms is None or now_ms - self._last_poll_ms >= self.poll_interval_ms

    def tick(self) -> GridFrame:
        """Run one synchronous tick; returns the committed frame"""
        now_ms = self.clock.now_ms()

        if self._poll_due(now_ms):
            self._last_poll_ms = now_ms
            self.engine.apply_read(self.source.read())

        self.ticks += 1
        return self.engine.render(now_ms)

    # ------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------

    async def run(self, max_frames: Optional[int] = None) -> None:
        """
        Tick at the target FPS until stop() is called or max_frames ticks ran.
        """
        frame_delay = 1.0 / self.fps
        self.running = True

        log.info(f"Render loop @ {self.fps} FPS (delay={frame_delay*1000:.2f}ms)",
                 poll_interval=f"{self.poll_interval_ms}ms")

        try:
            while self.running:
                started = time.perf_counter()
                self.tick()

                if max_frames is not None and self.ticks >= max_frames:
                    break

                elapsed = time.perf_counter() - started
                await asyncio.sleep(max(0.0, frame_delay - elapsed))
        finally:
            self.running = False
            log.info("Render loop stopped", ticks=self.ticks, presented=self.frames_presented)

    def stop(self) -> None:
        self.running = False

    def shutdown(self) -> None:
        """Blank the display and release the reader"""
        self.engine.assembler.remove_ready_listener(self._present)
        try:
            self.display.clear()
        except Exception as e:
            log.error("Display clear failed", error=str(e))
        self.source.close()
