"""
Utility functions for the sigil pattern engine
"""

from .colors import (
    hue_to_wheel16,
    hsv_to_rgb,
    rgb_to_packed,
    packed_to_rgb,
    hue_to_name,
)

__all__ = [
    'hue_to_wheel16',
    'hsv_to_rgb',
    'rgb_to_packed',
    'packed_to_rgb',
    'hue_to_name',
]
