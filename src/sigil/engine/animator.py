"""
Pattern animator

Turns cached geometry plus a millisecond clock into ring indices and
activation decisions, and writes the result through a FrameAssembler with
four-way mirroring. Holds no state: the output is a pure function of
(geometry, palette, t_ms).

Rings drift outward at SPEED rings per millisecond and wrap every
RING_PERIOD rings, so the whole pattern repeats every RING_CYCLE_MS.
"""

import math
from typing import Sequence

from sigil.engine.frame_assembler import FrameAssembler
from sigil.models.color import Color
from sigil.models.frame import CENTER_X, CENTER_Y
from sigil.models.geometry import GeometryCache, QUADRANT_WIDTH, QUADRANT_HEIGHT

SPEED = 0.001        # rings per millisecond
RING_PERIOD = 4.0    # rings per cycle
RING_CYCLE_MS = int(RING_PERIOD / SPEED)   # 4000

U32 = 0xFFFFFFFF


def positive_mod(value: float, period: float) -> float:
    """Float modulo that always lands in [0, period)"""
    return math.fmod(math.fmod(value, period) + period, period)


def ring_index_at(geometry: GeometryCache, x: int, y: int, t_ms: int) -> int:
    """Ring a quadrant cell falls into at time t_ms (0..3)"""
    d = max(geometry.distance(x, y), 0.0)
    d = d / geometry.ring_size_modifier
    shifted = d - t_ms * SPEED
    return int(math.floor(positive_mod(shifted, RING_PERIOD)))


def activation_hash(geometry: GeometryCache, x: int, y: int, ring_index: int) -> int:
    """32-bit unsigned hash keyed on seed, cell, style and ring"""
    h = ((geometry.seed_byte * 31 + x) * 31 + y) & U32
    h = (((h ^ geometry.style_byte) * 31) + ring_index) & U32
    return h


def is_active(geometry: GeometryCache, x: int, y: int, ring_index: int) -> bool:
    """Lower sparsity byte = denser pattern"""
    return (activation_hash(geometry, x, y, ring_index) & 0xFF) > geometry.sparsity_byte


def ring_color(palette: Sequence[Color], seed_byte: int, ring_index: int) -> Color:
    return palette[(seed_byte + ring_index) % len(palette)]


def render_pattern(
    geometry: GeometryCache,
    palette: Sequence[Color],
    t_ms: int,
    assembler: FrameAssembler,
) -> None:
    """
    Write one animated pattern into an open render pass.

    The caller owns begin()/commit(); this only writes pixels.
    """
    if geometry.dirty:
        raise RuntimeError("render_pattern() called with stale geometry")

    assembler.set_pixel(CENTER_X, CENTER_Y, palette[geometry.seed_byte % len(palette)])

    for y in range(QUADRANT_HEIGHT):
        for x in range(QUADRANT_WIDTH):
            if x == CENTER_X and y == CENTER_Y:
                continue

            ring = ring_index_at(geometry, x, y, t_ms)
            if ring < 1:
                continue
            if not is_active(geometry, x, y, ring):
                continue

            assembler.set_mirrored(x, y, ring_color(palette, geometry.seed_byte, ring))
