"""
Palette derivation

Identifier bytes 0-2 seed a five-color palette: hues evenly spaced 72°
apart, saturation and value stepping down by 10 per entry.
"""

from typing import List

from sigil.models.color import Color

PALETTE_SIZE = 5
HUE_STEP = 360 // PALETTE_SIZE   # 72°
SV_STEP = 10


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"Seed {name}={value} out of byte range 0-255")


def palette_hues(seed_r: int, seed_g: int, seed_b: int) -> List[int]:
    """Hue (degrees) of each palette entry, before HSV conversion"""
    for name, value in (("seed_r", seed_r), ("seed_g", seed_g), ("seed_b", seed_b)):
        _check_byte(name, value)
    base_hue = ((seed_r << 8) | seed_g) % 360
    return [(base_hue + i * HUE_STEP) % 360 for i in range(PALETTE_SIZE)]


def generate_palette(seed_r: int, seed_g: int, seed_b: int) -> List[Color]:
    """
    Derive the ordered palette for one identifier.

    Saturation and value are computed as unsigned bytes: a step below zero
    wraps modulo 256 instead of clamping. This keeps old tags rendering the
    exact colors they always had.

    Args:
        seed_r, seed_g, seed_b: Identifier bytes 0, 1, 2

    Returns:
        List of exactly PALETTE_SIZE colors
    """
    hues = palette_hues(seed_r, seed_g, seed_b)
    base_sat = 200 + seed_b % 56
    base_val = 200 + seed_g % 56

    palette = []
    for i, hue in enumerate(hues):
        sat = (base_sat - SV_STEP * i) & 0xFF
        val = (base_val - SV_STEP * i) & 0xFF
        palette.append(Color.from_hsv(hue, sat, val))
    return palette
