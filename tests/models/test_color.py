import pytest

from sigil.models.color import Color


class TestColor:

    def test_from_hsv(self):
        assert Color.from_hsv(0, 255, 255).to_rgb() == (255, 0, 0)
        assert Color.from_hsv(480, 255, 255) == Color.from_hsv(120, 255, 255)

    def test_packed_roundtrip(self):
        c = Color.from_packed(0x20B4C4)
        assert c.to_rgb() == (32, 180, 196)
        assert c.to_packed() == 0x20B4C4

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
    def test_channel_range(self, channels):
        with pytest.raises(ValueError):
            Color(*channels)

    def test_immutable(self):
        c = Color.red()
        with pytest.raises(AttributeError):
            c.r = 0

    def test_black(self):
        assert Color.black().is_black()
        assert not Color(0, 0, 1).is_black()

    def test_str_is_hex(self):
        assert str(Color(226, 10, 118)) == "#E20A76"
