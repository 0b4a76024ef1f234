"""
Color conversion utilities

Pure integer functions for color space conversions. Results are bit-exact
across platforms, which the pattern engine relies on for reproducible frames.
"""

from typing import Tuple


def hue_to_wheel16(hue: int) -> int:
    """
    Scale hue in degrees (0-359) onto the 16-bit color wheel (0-65535).

    Example:
        hue_to_wheel16(0)    # 0
        hue_to_wheel16(180)  # 32768
    """
    return ((hue % 360) * 65536 // 360) & 0xFFFF


def hsv_to_rgb(hue: int, sat: int, val: int) -> Tuple[int, int, int]:
    """
    Convert HSV to RGB (0-255) using the integer NeoPixel color wheel.

    The hue is first mapped onto the 16-bit wheel, then onto 1530 discrete
    steps (6 segments of 255). Saturation and value are applied with the
    "+1 then >>8" trick instead of division by 255.

    Args:
        hue: Hue in degrees (wraps modulo 360)
        sat: Saturation 0-255
        val: Value 0-255

    Returns:
        (r, g, b) tuple with values 0-255

    Example:
        hsv_to_rgb(0, 255, 255)    # (255, 0, 0)
        hsv_to_rgb(120, 255, 255)  # (0, 255, 0)
    """
    if not (0 <= sat <= 255 and 0 <= val <= 255):
        raise ValueError(f"Saturation/value out of byte range: sat={sat}, val={val}")

    step = (hue_to_wheel16(hue) * 1530 + 32768) // 65536

    if step < 510:          # Red to Green-1
        b = 0
        if step < 255:
            r, g = 255, step
        else:
            r, g = 510 - step, 255
    elif step < 1020:       # Green to Blue-1
        r = 0
        if step < 765:
            g, b = 255, step - 510
        else:
            g, b = 1020 - step, 255
    elif step < 1530:       # Blue to Red-1
        g = 0
        if step < 1275:
            r, b = step - 1020, 255
        else:
            r, b = 255, 1530 - step
    else:                   # Last half step of red
        r, g, b = 255, 0, 0

    v1 = 1 + val
    s1 = 1 + sat
    s2 = 255 - sat

    def scale(c: int) -> int:
        return ((((c * s1) >> 8) + s2) * v1) >> 8

    return (scale(r), scale(g), scale(b))


def rgb_to_packed(r: int, g: int, b: int) -> int:
    """Pack RGB channels into a 24-bit 0xRRGGBB integer"""
    return (r << 16) | (g << 8) | b


def packed_to_rgb(value: int) -> Tuple[int, int, int]:
    """Unpack a 24-bit 0xRRGGBB integer into channels"""
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def hue_to_name(hue: int) -> str:
    """
    Convert hue to approximate color name (for logging)

    Example:
        hue_to_name(0)    # "red"
        hue_to_name(120)  # "green"
    """
    hue = hue % 360
    if hue < 15 or hue >= 345:
        return "red"
    elif hue < 45:
        return "orange"
    elif hue < 75:
        return "yellow"
    elif hue < 105:
        return "lime"
    elif hue < 135:
        return "green"
    elif hue < 165:
        return "cyan"
    elif hue < 195:
        return "sky blue"
    elif hue < 225:
        return "blue"
    elif hue < 255:
        return "indigo"
    elif hue < 285:
        return "violet"
    elif hue < 315:
        return "magenta"
    else:
        return "pink"
