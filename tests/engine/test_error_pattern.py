"""
Tests for the error marker frame.
"""

from sigil.engine.error_pattern import render_error_frame, error_marker_pixels, ERROR_COLOR
from sigil.models.color import Color
from sigil.models.enums import FrameKind


class TestErrorMarker:

    def test_x_shape(self, assembler):
        frame = render_error_frame(assembler)
        expected = set(error_marker_pixels())

        assert (2, 0) in expected and (10, 0) in expected
        assert (6, 4) in expected
        assert (2, 8) in expected and (10, 8) in expected

        for y in range(9):
            for x in range(13):
                if (x, y) in expected:
                    assert frame.get(x, y) == ERROR_COLOR
                else:
                    assert frame.get(x, y).is_black()

    def test_pixel_count(self, assembler):
        # two diagonals of 9 crossing in one shared center pixel
        assert render_error_frame(assembler).count_lit() == 17

    def test_outer_columns_dark(self, assembler):
        frame = render_error_frame(assembler)
        for y in range(9):
            for x in (0, 1, 11, 12):
                assert frame.get(x, y).is_black()

    def test_symmetric(self, assembler):
        assert render_error_frame(assembler).is_symmetric()

    def test_kind_and_color(self, assembler):
        frame = render_error_frame(assembler, t_ms=500, color=Color(200, 0, 0))
        assert frame.kind is FrameKind.ERROR
        assert frame.t_ms == 500
        assert frame.get(6, 4) == Color(200, 0, 0)

    def test_default_is_red(self):
        assert ERROR_COLOR.to_rgb() == (255, 0, 0)
