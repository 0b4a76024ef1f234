"""
Tests for PatternRuntime: poll cadence, one presentation per tick, async loop.
"""

import pytest
from unittest.mock import MagicMock

from sigil.engine.pattern_engine import PatternEngine
from sigil.hardware.display.virtual_display import VirtualGridDisplay
from sigil.hardware.reader.scripted_reader import ScriptedIdentifierSource
from sigil.models.enums import FrameKind
from sigil.runtime.clock import ManualClock, MonotonicClock
from sigil.runtime.pattern_runtime import PatternRuntime


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def display():
    return VirtualGridDisplay()


def make_runtime(script, clock, display, poll_interval_ms=100, repeat=False):
    source = ScriptedIdentifierSource(script, repeat=repeat)
    return PatternRuntime(PatternEngine(), source, display, clock=clock, poll_interval_ms=poll_interval_ms)


class TestTick:

    def test_first_tick_polls(self, clock, display):
        runtime = make_runtime(["04:1A:2B:3C:05:10:07"], clock, display)
        frame = runtime.tick()
        assert frame.kind is FrameKind.PATTERN
        assert runtime.source.polls == 1

    def test_poll_cadence(self, clock, display):
        runtime = make_runtime(["04:1A:2B:3C:05:10:07 *10"], clock, display, poll_interval_ms=100)
        for _ in range(10):
            runtime.tick()
            clock.advance(20)
        # ticks at 0..180 ms: polls at 0 and 100
        assert runtime.source.polls == 2
        assert runtime.ticks == 10

    def test_zero_interval_polls_every_tick(self, clock, display):
        runtime = make_runtime(["- *5"], clock, display, poll_interval_ms=0)
        for _ in range(5):
            runtime.tick()
        assert runtime.source.polls == 5

    def test_one_present_per_tick(self, clock, display):
        runtime = make_runtime(["04:1A:2B:3C:05:10:07"], clock, display)
        for _ in range(7):
            frame = runtime.tick()
            clock.advance(16)
        assert display.present_count == 7
        assert runtime.frames_presented == 7
        assert display.frame is frame

    def test_follows_script(self, clock, display):
        runtime = make_runtime(["04:1A:2B:3C:05:10:07", "-", "!fail", "04:1A:2B:3C:05:10:07"], clock, display)
        kinds = []
        for _ in range(4):
            kinds.append(runtime.tick().kind)
            clock.advance(100)
        assert kinds == [FrameKind.PATTERN, FrameKind.BLANK, FrameKind.ERROR, FrameKind.PATTERN]

    def test_frame_time_from_clock(self, clock, display):
        runtime = make_runtime([], clock, display)
        clock.advance(1234)
        assert runtime.tick().t_ms == 1234

    def test_present_failure_tolerated(self, clock):
        display = MagicMock()
        display.present.side_effect = OSError("spi bus gone")
        runtime = make_runtime(["04:1A:2B:3C:05:10:07"], clock, display)

        runtime.tick()
        clock.advance(16)
        runtime.tick()

        assert runtime.present_errors == 2
        assert runtime.ticks == 2

    def test_shutdown(self, clock):
        display = MagicMock()
        source = MagicMock()
        engine = PatternEngine()
        runtime = PatternRuntime(engine, source, display, clock=clock)
        runtime.shutdown()

        display.clear.assert_called_once()
        source.close.assert_called_once()

        engine.render(0)
        display.present.assert_not_called()


class TestRun:

    @pytest.mark.asyncio
    async def test_max_frames(self, display):
        source = ScriptedIdentifierSource(["04:1A:2B:3C:05:10:07"])
        runtime = PatternRuntime(PatternEngine(), source, display, fps=240)

        await runtime.run(max_frames=5)

        assert runtime.ticks == 5
        assert display.present_count == 5
        assert runtime.running is False

    @pytest.mark.asyncio
    async def test_stop(self, display):
        source = ScriptedIdentifierSource([])
        runtime = PatternRuntime(PatternEngine(), source, display, fps=240)
        display.present = MagicMock(side_effect=lambda frame: runtime.stop())

        await runtime.run()
        assert runtime.ticks == 1


class TestClocks:

    def test_manual_clock(self):
        clock = ManualClock(start_ms=10)
        assert clock.advance(5) == 15
        assert clock.now_ms() == 15
        with pytest.raises(ValueError):
            clock.advance(-1)

    def test_monotonic_clock(self):
        times = iter([100.0, 100.25, 101.5])
        clock = MonotonicClock(time_fn=lambda: next(times))
        assert clock.now_ms() == 250
        assert clock.now_ms() == 1500
