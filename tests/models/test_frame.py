import pytest

from sigil.models.color import Color
from sigil.models.enums import FrameKind
from sigil.models.frame import GridFrame, blank_rows, GRID_WIDTH, GRID_HEIGHT, CENTER_X, CENTER_Y


def frame_with(points, color=Color.red()):
    rows = [list(row) for row in blank_rows()]
    for x, y in points:
        rows[y][x] = color
    return GridFrame(pixels=tuple(tuple(r) for r in rows), kind=FrameKind.PATTERN)


class TestGridFrame:

    def test_dimensions(self):
        assert (GRID_WIDTH, GRID_HEIGHT) == (13, 9)
        assert (CENTER_X, CENTER_Y) == (6, 4)

    def test_default_is_blank(self):
        frame = GridFrame()
        assert frame.is_blank()
        assert frame.kind is FrameKind.BLANK
        assert frame.count_lit() == 0

    def test_wrong_size_rejected(self):
        with pytest.raises(ValueError):
            GridFrame(pixels=blank_rows()[:-1])

    def test_get_bounds(self):
        frame = GridFrame()
        with pytest.raises(IndexError):
            frame.get(13, 0)
        with pytest.raises(IndexError):
            frame.get(0, -1)

    def test_symmetry(self):
        assert frame_with([(1, 1), (11, 1), (1, 7), (11, 7)]).is_symmetric()
        assert not frame_with([(1, 1)]).is_symmetric()

    def test_packed_rows(self):
        rows = frame_with([(CENTER_X, CENTER_Y)]).to_packed_rows()
        assert rows[4][6] == 0xFF0000
        assert sum(v != 0 for row in rows for v in row) == 1

    def test_equality_ignores_timestamp(self):
        a = GridFrame(timestamp=1.0)
        b = GridFrame(timestamp=2.0)
        assert a == b
        assert a != GridFrame(kind=FrameKind.ERROR, timestamp=1.0)
