"""
Tests for FrameAssembler: render passes, commit, frame-ready listeners.
"""

import pytest
from unittest.mock import MagicMock

from sigil.models.color import Color
from sigil.models.enums import FrameKind


class TestRenderPass:

    def test_begin_zeroes_buffer(self, assembler):
        assembler.begin(0)
        assembler.set_pixel(3, 3, Color(10, 20, 30))
        assembler.commit(FrameKind.PATTERN)

        assembler.begin(16)
        frame = assembler.commit(FrameKind.PATTERN)
        assert frame.is_blank()
        assert frame.t_ms == 16

    def test_set_pixel_outside_pass_rejected(self, assembler):
        with pytest.raises(RuntimeError):
            assembler.set_pixel(0, 0, Color.red())

    def test_commit_without_begin_rejected(self, assembler):
        with pytest.raises(RuntimeError):
            assembler.commit(FrameKind.BLANK)

    def test_pass_closed_after_commit(self, assembler):
        assembler.begin(0)
        assert assembler.in_pass
        assembler.commit(FrameKind.BLANK)
        assert not assembler.in_pass
        with pytest.raises(RuntimeError):
            assembler.set_pixel(0, 0, Color.red())

    @pytest.mark.parametrize("x, y", [(13, 0), (0, 9), (-1, 4)])
    def test_out_of_bounds_rejected(self, assembler, x, y):
        assembler.begin(0)
        with pytest.raises(IndexError):
            assembler.set_pixel(x, y, Color.red())

    def test_set_mirrored_writes_four_pixels(self, assembler):
        blue = Color(0, 0, 255)
        assembler.begin(0)
        assembler.set_mirrored(1, 2, blue)
        frame = assembler.commit(FrameKind.PATTERN)

        assert frame.get(1, 2) == frame.get(11, 2) == frame.get(1, 6) == frame.get(11, 6) == blue
        assert frame.count_lit() == 4

    def test_set_mirrored_center_row_and_column(self, assembler):
        assembler.begin(0)
        assembler.set_mirrored(6, 4, Color.red())
        frame = assembler.commit(FrameKind.PATTERN)
        assert frame.count_lit() == 1


class TestCommit:

    def test_latest_only_changes_on_commit(self, assembler):
        assert assembler.latest is None

        assembler.begin(0)
        first = assembler.commit(FrameKind.BLANK)
        assert assembler.latest is first

        assembler.begin(1)
        assembler.set_pixel(0, 0, Color.red())
        assert assembler.latest is first
        assert assembler.latest.is_blank()

        second = assembler.commit(FrameKind.PATTERN)
        assert assembler.latest is second

    def test_sequence_increments(self, assembler):
        frames = []
        for t in range(3):
            assembler.begin(t)
            frames.append(assembler.commit(FrameKind.BLANK))
        assert [f.sequence for f in frames] == [1, 2, 3]
        assert assembler.frames_committed == 3

    def test_committed_frame_carries_kind(self, assembler):
        assembler.begin(0)
        assert assembler.commit(FrameKind.ERROR).kind is FrameKind.ERROR


class TestListeners:

    def test_notified_once_per_commit(self, assembler):
        listener = MagicMock()
        assembler.add_ready_listener(listener)

        assembler.begin(0)
        assembler.set_pixel(0, 0, Color.red())
        listener.assert_not_called()

        frame = assembler.commit(FrameKind.PATTERN)
        listener.assert_called_once_with(frame)

    def test_removed_listener_not_called(self, assembler):
        listener = MagicMock()
        assembler.add_ready_listener(listener)
        assembler.remove_ready_listener(listener)
        assembler.remove_ready_listener(listener)

        assembler.begin(0)
        assembler.commit(FrameKind.BLANK)
        listener.assert_not_called()

    def test_failing_listener_does_not_block_others(self, assembler, capsys):
        broken = MagicMock(side_effect=ValueError("sink gone"))
        healthy = MagicMock()
        assembler.add_ready_listener(broken)
        assembler.add_ready_listener(healthy)

        assembler.begin(0)
        frame = assembler.commit(FrameKind.BLANK)

        healthy.assert_called_once_with(frame)
        out = capsys.readouterr().out
        assert "Frame-ready listener failed" in out
        assert "sink gone" in out
