"""
Color model - 24-bit RGB value

Every pixel in a GridFrame is a Color. Colors are immutable so a committed
frame can be shared with sinks without copying.
"""

from dataclasses import dataclass
from typing import Tuple

from sigil.utils.colors import hsv_to_rgb, rgb_to_packed, packed_to_rgb


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB color (0-255 per channel)

    Examples:
        # Create from channels
        color = Color.from_rgb(255, 128, 0)

        # Create from HSV (hue in degrees, sat/val as bytes)
        color = Color.from_hsv(120, 255, 255)  # Green

        # Hardware-friendly forms
        r, g, b = color.to_rgb()
        packed = color.to_packed()  # 0xRRGGBB
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name}={value} out of range 0-255")

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(r, g, b)

    @classmethod
    def from_packed(cls, value: int) -> 'Color':
        """Create from 0xRRGGBB integer"""
        return cls(*packed_to_rgb(value))

    @classmethod
    def from_hsv(cls, hue: int, sat: int, val: int) -> 'Color':
        """
        Create from HSV

        Args:
            hue: Hue in degrees (wraps modulo 360)
            sat: Saturation 0-255
            val: Value 0-255
        """
        return cls(*hsv_to_rgb(hue, sat, val))

    @staticmethod
    def black() -> 'Color':
        return Color(0, 0, 0)

    @staticmethod
    def red() -> 'Color':
        return Color(255, 0, 0)

    # === RENDERING ===

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_packed(self) -> int:
        return rgb_to_packed(self.r, self.g, self.b)

    def is_black(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0

    # === STRING REPRESENTATION ===

    def __str__(self) -> str:
        return f"#{self.to_packed():06X}"

    def __repr__(self) -> str:
        return f"Color(RGB={self.to_rgb()})"
